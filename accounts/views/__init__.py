from accounts.views.profile import ProfileImageView, ProfileUpdateView, ProfileView
from accounts.views.registration import LoginView, RegistrationView

__all__ = [
    "ProfileImageView",
    "ProfileUpdateView",
    "ProfileView",
    "LoginView",
    "RegistrationView",
]
