# =============================================================================
# tests/test_validation.py - Payload Validation Tests
# =============================================================================
# Validation reports every violated constraint as {message, path} pairs
# and never stops at the first one.
# =============================================================================

import pytest

from users_api.app.schemas.user import UserCreate, UserUpdate
from users_api.app.services.validation import validate_user, validate_user_update


def _paths(result):
    return sorted(tuple(error["path"]) for error in result.errors)


class TestValidateUser:
    """Tests for validate_user."""

    def test_valid_payload(self, neo):
        result = validate_user(neo)

        assert result.ok
        assert result.errors == []
        assert isinstance(result.value, UserCreate)
        assert result.value.model_dump() == neo

    def test_numeric_string_age_is_normalized(self):
        result = validate_user({"login": "Neo", "age": "30", "password": "aB1"})

        assert result.ok
        assert result.value.age == 30

    def test_empty_payload_reports_every_missing_field(self):
        result = validate_user({})

        assert not result.ok
        assert result.value is None
        assert _paths(result) == [("age",), ("login",), ("password",)]
        assert all(error["message"] == "Field required" for error in result.errors)

    def test_collects_all_violations(self):
        result = validate_user({"login": "", "age": -1, "password": "weak"})

        assert _paths(result) == [("age",), ("login",), ("password",)]

    def test_negative_age(self):
        result = validate_user({"login": "Neo", "age": -5, "password": "aB1"})

        assert len(result.errors) == 1
        assert result.errors[0]["path"] == ["age"]

    def test_non_integer_age(self):
        result = validate_user({"login": "Neo", "age": "thirty", "password": "aB1"})

        assert _paths(result) == [("age",)]

    @pytest.mark.parametrize("age", [True, False])
    def test_boolean_age_rejected(self, age):
        result = validate_user({"login": "Neo", "age": age, "password": "aB1"})

        assert not result.ok
        assert _paths(result) == [("age",)]
        assert "boolean" in result.errors[0]["message"]

    @pytest.mark.parametrize("password", ["abc", "ABC", "123", "aB", "a1", "B1"])
    def test_weak_passwords_rejected(self, password):
        result = validate_user({"login": "Neo", "age": 30, "password": password})

        assert _paths(result) == [("password",)]
        assert "uppercase" in result.errors[0]["message"]

    def test_unknown_fields_rejected(self, neo):
        result = validate_user({**neo, "isDeleted": True, "id": "42"})

        assert _paths(result) == [("id",), ("isDeleted",)]

    def test_non_object_payload(self):
        result = validate_user(["Neo", 30, "aB1"])

        assert not result.ok
        assert result.errors[0]["path"] == []


class TestValidateUserUpdate:
    """Tests for validate_user_update."""

    def test_partial_payload(self):
        result = validate_user_update({"age": 31})

        assert result.ok
        assert isinstance(result.value, UserUpdate)
        assert result.value.changes() == {"age": 31}

    def test_empty_update_rejected(self):
        result = validate_user_update({})

        assert not result.ok
        assert result.errors[0]["path"] == []

    def test_explicit_nulls_are_ignored(self):
        result = validate_user_update({"login": None, "age": 12})

        assert result.value.changes() == {"age": 12}

    def test_present_fields_follow_create_rules(self):
        result = validate_user_update({"age": -1, "password": "nodigits"})

        assert _paths(result) == [("age",), ("password",)]

    def test_boolean_age_rejected(self):
        result = validate_user_update({"age": True})

        assert _paths(result) == [("age",)]

    def test_deletion_flag_cannot_be_patched(self):
        result = validate_user_update({"isDeleted": False})

        assert _paths(result) == [("isDeleted",)]
