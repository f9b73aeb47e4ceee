from django.conf import settings
from rest_framework import serializers

from accounts.models import User

PROFILE_IMAGE_MAX_SIZE = getattr(settings, "PROFILE_IMAGE_MAX_SIZE", 2 * 1024 * 1024)


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("email", "first_name", "last_name", "profile_image")
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """Validates profile name updates."""

    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)


class ProfileImageSerializer(serializers.Serializer):
    """Validates profile image uploads: images only, bounded size."""

    file = serializers.FileField()

    def validate_file(self, value):
        content_type = getattr(value, "content_type", "") or ""
        if not content_type.startswith("image/"):
            raise serializers.ValidationError("File must be an image (jpg/png).")
        if value.size > PROFILE_IMAGE_MAX_SIZE:
            raise serializers.ValidationError(
                f"File is larger than {PROFILE_IMAGE_MAX_SIZE} bytes."
            )
        return value
