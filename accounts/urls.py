from django.urls import path

from accounts.views import (
    LoginView,
    ProfileImageView,
    ProfileUpdateView,
    ProfileView,
    RegistrationView,
)

urlpatterns = [
    path("registration", RegistrationView.as_view(), name="registration"),
    path("login", LoginView.as_view(), name="login"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("profile/update", ProfileUpdateView.as_view(), name="profile-update"),
    path("profile/image", ProfileImageView.as_view(), name="profile-image"),
]
