from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.views import APIView

from accounts.serializers import (
    ProfileImageSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
)
from accounts.services import UserService
from ledger.utils import success_response


class ProfileView(APIView):
    """GET /profile — Profile of the authenticated user."""

    def get(self, request, *args, **kwargs):
        return success_response(
            "Success", ProfileSerializer(request.user, context={"request": request}).data
        )


class ProfileUpdateView(APIView):
    """
    PUT /profile/update — Update first and last name.

    Request body: {"first_name", "last_name"}
    """

    def put(self, request, *args, **kwargs):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserService.update_profile(request.user, **serializer.validated_data)
        return success_response(
            "Profile updated", ProfileSerializer(user, context={"request": request}).data
        )


class ProfileImageView(APIView):
    """PUT /profile/image — Upload a profile image (multipart field ``file``)."""

    parser_classes = [MultiPartParser, FormParser]

    def put(self, request, *args, **kwargs):
        serializer = ProfileImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserService.update_profile_image(
            request.user, serializer.validated_data["file"]
        )
        return success_response(
            "Profile image updated", ProfileSerializer(user, context={"request": request}).data
        )
