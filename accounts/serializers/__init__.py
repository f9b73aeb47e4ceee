from accounts.serializers.profile import (
    ProfileImageSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
)
from accounts.serializers.registration import LoginSerializer, RegistrationSerializer

__all__ = [
    "ProfileImageSerializer",
    "ProfileSerializer",
    "ProfileUpdateSerializer",
    "LoginSerializer",
    "RegistrationSerializer",
]
