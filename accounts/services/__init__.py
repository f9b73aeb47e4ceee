from accounts.services.user import UserService

__all__ = ["UserService"]
