import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction
from rest_framework.authtoken.models import Token

from accounts.exceptions import EmailAlreadyRegistered, InvalidCredentials
from accounts.models import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Registration, login and profile updates.

    Password hashing and token format are Django's and DRF's defaults;
    this service only orchestrates them.
    """

    @staticmethod
    def register(email: str, password: str, first_name: str, last_name: str) -> User:
        if User.objects.filter(email__iexact=email).exists():
            raise EmailAlreadyRegistered()

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegistered() from exc

        logger.info("User registered: user=%s email=%s", user.pk, user.email)
        return user

    @staticmethod
    def login(email: str, password: str) -> str:
        """Return an API token for valid credentials."""
        user = authenticate(email=email, password=password)
        if user is None:
            logger.warning("Login failed: email=%s", email)
            raise InvalidCredentials()

        token, _ = Token.objects.get_or_create(user=user)
        logger.info("User logged in: user=%s", user.pk)
        return token.key

    @staticmethod
    def update_profile(user: User, first_name: str, last_name: str) -> User:
        user.first_name = first_name
        user.last_name = last_name
        user.save(update_fields=["first_name", "last_name"])
        return user

    @staticmethod
    def update_profile_image(user: User, image) -> User:
        previous = user.profile_image.name if user.profile_image else None
        user.profile_image.save(image.name, image, save=False)
        user.save(update_fields=["profile_image"])
        logger.info(
            "Profile image updated: user=%s image=%s previous=%s",
            user.pk,
            user.profile_image.name,
            previous,
        )
        return user
