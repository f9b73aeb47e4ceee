import shutil
import tempfile
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from accounts.exceptions import EmailAlreadyRegistered, InvalidCredentials
from accounts.models import User
from accounts.serializers import LoginSerializer, RegistrationSerializer
from accounts.services import UserService

MEDIA_ROOT = tempfile.mkdtemp()

# 1x1 transparent PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"
    b"\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01"
    b"\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


# ============================================================
# Model Tests
# ============================================================


class UserModelTest(TestCase):
    def test_create_user(self):
        user = User.objects.create_user(
            email="budi@example.com", password="secret-pass", first_name="Budi", last_name="S"
        )
        self.assertEqual(user.email, "budi@example.com")
        self.assertTrue(user.check_password("secret-pass"))
        self.assertFalse(user.is_staff)
        self.assertEqual(str(user), "budi@example.com")

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="secret-pass")

    def test_email_is_stored_lowercase(self):
        user = User.objects.create_user(email="Budi@Example.com", password="secret-pass")
        self.assertEqual(user.email, "budi@example.com")

    def test_natural_key_lookup_ignores_case(self):
        user = User.objects.create_user(email="budi@example.com", password="secret-pass")
        self.assertEqual(User.objects.get_by_natural_key("BUDI@example.COM"), user)

    def test_create_superuser(self):
        user = User.objects.create_superuser(email="admin@example.com", password="secret-pass")
        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)


# ============================================================
# Service Tests
# ============================================================


class UserServiceTest(TestCase):
    def test_register(self):
        user = UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")
        self.assertEqual(user.first_name, "Budi")
        self.assertTrue(user.check_password("secret-pass"))

    def test_register_duplicate_email(self):
        UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")
        with self.assertRaises(EmailAlreadyRegistered):
            UserService.register("BUDI@example.com", "other-pass", "Budi", "Lain")

    def test_login_returns_token(self):
        user = UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")
        token = UserService.login("budi@example.com", "secret-pass")
        self.assertEqual(token, Token.objects.get(user=user).key)
        # Logging in again reuses the token
        self.assertEqual(UserService.login("budi@example.com", "secret-pass"), token)

    def test_login_wrong_password(self):
        UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")
        with self.assertRaises(InvalidCredentials):
            UserService.login("budi@example.com", "wrong-pass")

    def test_login_unknown_email(self):
        with self.assertRaises(InvalidCredentials):
            UserService.login("nobody@example.com", "secret-pass")

    def test_login_ignores_email_case(self):
        user = UserService.register("Budi@Example.com", "secret-pass", "Budi", "Santoso")
        token = UserService.login("budi@example.com", "secret-pass")
        self.assertEqual(token, Token.objects.get(user=user).key)


class RegistrationSerializerTest(TestCase):
    def test_short_password_is_reported_with_other_fields(self):
        serializer = RegistrationSerializer(
            data={
                "email": "not-an-email",
                "password": "short",
                "first_name": "Budi",
                "last_name": "Santoso",
            }
        )
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors["password"][0].code, "password_too_short")
        self.assertIn("email", serializer.errors)

    def test_email_is_lowercased(self):
        serializer = LoginSerializer(data={"email": "Budi@Example.com", "password": "x"})
        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.validated_data["email"], "budi@example.com")


# ============================================================
# API Tests
# ============================================================


class RegistrationAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.payload = {
            "email": "budi@example.com",
            "password": "secret-pass",
            "first_name": "Budi",
            "last_name": "Santoso",
        }

    def test_register_success(self):
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], 0)
        self.assertTrue(User.objects.filter(email="budi@example.com").exists())

    def test_register_missing_parameter(self):
        del self.payload["last_name"]
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)

    def test_register_invalid_email(self):
        self.payload["email"] = "not-an-email"
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    def test_register_short_password(self):
        self.payload["password"] = "short"
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 202)

    def test_register_duplicate_email(self):
        self.client.post("/registration", self.payload, format="json")
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 203)

    def test_register_short_password_with_invalid_email(self):
        self.payload["password"] = "short"
        self.payload["email"] = "not-an-email"
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 202)
        self.assertEqual(response.data["message"], "Password must be at least 8 characters.")

    def test_register_duplicate_email_other_case(self):
        self.client.post("/registration", self.payload, format="json")
        self.payload["email"] = "BUDI@example.com"
        response = self.client.post("/registration", self.payload, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 203)


class LoginAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")

    def test_login_success(self):
        response = self.client.post(
            "/login", {"email": "budi@example.com", "password": "secret-pass"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], 0)
        self.assertIn("token", response.data["data"])

    def test_login_email_case_insensitive(self):
        response = self.client.post(
            "/login", {"email": "Budi@Example.COM", "password": "secret-pass"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("token", response.data["data"])

    def test_login_wrong_password(self):
        response = self.client.post(
            "/login", {"email": "budi@example.com", "password": "wrong-pass"}, format="json"
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["status"], 103)
        self.assertIsNone(response.data["data"])

    def test_login_missing_password(self):
        response = self.client.post("/login", {"email": "budi@example.com"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)

    def test_token_grants_access(self):
        response = self.client.post(
            "/login", {"email": "budi@example.com", "password": "secret-pass"}, format="json"
        )
        token = response.data["data"]["token"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token}")
        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["data"]["email"], "budi@example.com")

    def test_invalid_token(self):
        self.client.credentials(HTTP_AUTHORIZATION="Token not-a-real-token")
        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["status"], 108)


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class ProfileAPITest(TestCase):
    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.client = APIClient()
        self.user = UserService.register("budi@example.com", "secret-pass", "Budi", "Santoso")
        self.client.force_authenticate(user=self.user)

    def test_get_profile(self):
        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data["data"],
            {
                "email": "budi@example.com",
                "first_name": "Budi",
                "last_name": "Santoso",
                "profile_image": None,
            },
        )

    def test_update_profile(self):
        response = self.client.put(
            "/profile/update", {"first_name": "Budi", "last_name": "Hartono"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["data"]["last_name"], "Hartono")
        self.user.refresh_from_db()
        self.assertEqual(self.user.last_name, "Hartono")

    def test_update_profile_missing_parameter(self):
        response = self.client.put("/profile/update", {"first_name": "Budi"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)

    def test_upload_profile_image(self):
        image = SimpleUploadedFile("avatar.png", PNG_BYTES, content_type="image/png")
        response = self.client.put("/profile/image", {"file": image}, format="multipart")
        self.assertEqual(response.status_code, 200)
        self.assertIn("avatar", response.data["data"]["profile_image"])
        self.user.refresh_from_db()
        self.assertTrue(self.user.profile_image.name.startswith(f"profile_images/{self.user.pk}/"))

    def test_upload_non_image(self):
        document = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        response = self.client.put("/profile/image", {"file": document}, format="multipart")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    @patch("accounts.serializers.profile.PROFILE_IMAGE_MAX_SIZE", 10)
    def test_upload_too_large(self):
        image = SimpleUploadedFile("avatar.png", PNG_BYTES, content_type="image/png")
        response = self.client.put("/profile/image", {"file": image}, format="multipart")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    def test_upload_missing_file(self):
        response = self.client.put("/profile/image", {}, format="multipart")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)
