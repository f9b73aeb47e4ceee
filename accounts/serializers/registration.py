from rest_framework import serializers

from accounts.exceptions import PasswordTooShort

MIN_PASSWORD_LENGTH = 8


class RegistrationSerializer(serializers.Serializer):
    """Validates registration requests."""

    email = serializers.EmailField(error_messages={"invalid": "Invalid email format."})
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)

    def validate_email(self, value):
        return value.lower()

    def validate_password(self, value):
        if len(value) < MIN_PASSWORD_LENGTH:
            raise serializers.ValidationError(
                PasswordTooShort.message, code=PasswordTooShort.validation_code
            )
        return value


class LoginSerializer(serializers.Serializer):
    """Validates login requests."""

    email = serializers.EmailField(error_messages={"invalid": "Invalid email format."})
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_email(self, value):
        return value.lower()
