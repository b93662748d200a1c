"""Tests for users module request models."""

import pytest
from pydantic import ValidationError

from modules.users.models import (
    AdminStatusRequest,
    CreateUserRequest,
    RoleSummary,
    UpdateUserRequest,
)


class TestCreateUserRequest:
    def test_requires_email(self):
        with pytest.raises(ValidationError):
            CreateUserRequest.model_validate({"name": "No Email"})

    def test_rejects_empty_email(self):
        with pytest.raises(ValidationError):
            CreateUserRequest.model_validate({"email": ""})

    def test_keeps_extra_profile_fields(self):
        request = CreateUserRequest.model_validate(
            {"email": "a@b.co", "name": "A", "photoURL": "http://x/y.png", "city": "Dhaka"}
        )
        assert request.profile_fields() == {
            "email": "a@b.co",
            "name": "A",
            "photoURL": "http://x/y.png",
            "city": "Dhaka",
        }

    def test_drops_server_managed_fields(self):
        request = CreateUserRequest.model_validate(
            {"email": "a@b.co", "emailVerified": True, "createdAt": "2020-01-01", "_id": "x"}
        )
        fields = request.profile_fields()
        assert "emailVerified" not in fields
        assert "createdAt" not in fields
        assert "_id" not in fields

    def test_is_admin_defaults_false(self):
        assert CreateUserRequest(email="a@b.co").is_admin is False


class TestUpdateUserRequest:
    def test_detects_email(self):
        request = UpdateUserRequest.model_validate({"email": "new@b.co", "name": "A"})
        assert request.immutable_fields_present() == ["email"]

    def test_detects_is_admin_even_when_false(self):
        request = UpdateUserRequest.model_validate({"isAdmin": False})
        assert request.immutable_fields_present() == ["isAdmin"]

    def test_changes_only_include_sent_fields(self):
        request = UpdateUserRequest.model_validate({"name": "B", "city": "Khulna"})
        assert request.changes() == {"name": "B", "city": "Khulna"}

    def test_changes_exclude_id_and_updated_at(self):
        request = UpdateUserRequest.model_validate({"name": "B", "updatedAt": "x", "_id": "y"})
        assert request.changes() == {"name": "B"}

    def test_changes_keep_verification_and_login_fields(self):
        request = UpdateUserRequest.model_validate(
            {"emailVerified": True, "lastLogin": "2026-01-01T00:00:00Z"}
        )
        assert request.changes() == {"emailVerified": True, "lastLogin": "2026-01-01T00:00:00Z"}


class TestAdminStatusRequest:
    def test_accepts_boolean(self):
        request = AdminStatusRequest.model_validate(
            {"isAdmin": True, "requestingAdminEmail": "admin@example.com"}
        )
        assert request.is_admin is True
        assert request.requesting_admin_email == "admin@example.com"

    @pytest.mark.parametrize("value", ["true", 1, "yes", None])
    def test_rejects_non_boolean(self, value):
        with pytest.raises(ValidationError):
            AdminStatusRequest.model_validate({"isAdmin": value})


class TestRoleSummary:
    def test_dumps_camel_case(self):
        summary = RoleSummary(email="a@b.co", is_admin=True)
        assert summary.to_document() == {"email": "a@b.co", "isAdmin": True, "role": "user"}
