"""Tests for the Profile schema and AuthState variants."""

import pytest
from pydantic import ValidationError

from oxedro.schemas import Profile, UserRole, Gender, Initial, Loading, Success, Error


class TestProfileDecoding:
    """Rows from the profiles table decode into Profile."""

    def test_full_row(self, student_row):
        """A complete row decodes with enum fields."""
        profile = Profile.model_validate(student_row)
        assert profile.unique_id == "TIME25ST9367"
        assert profile.role is UserRole.STUDENT
        assert profile.sex is Gender.FEMALE
        assert profile.is_active is True

    def test_superadmin_wire_value(self, student_row):
        """The 'superadmin' wire value maps to SUPER_ADMIN."""
        student_row["role"] = "superadmin"
        assert Profile.model_validate(student_row).role is UserRole.SUPER_ADMIN

    def test_minimal_row_uses_defaults(self):
        """Optional columns default when absent."""
        profile = Profile.model_validate({
            "id": "u-2",
            "unique_id": "TIME25TE0001",
            "email": "t@school.edu",
            "first_name": "Ravi",
            "role": "teacher",
        })
        assert profile.last_name is None
        assert profile.sex is None
        assert profile.is_active is True
        assert profile.created_at is None

    def test_unknown_columns_ignored(self, student_row):
        """Extra columns from the store are dropped."""
        student_row["guardian_name"] = "Someone"
        profile = Profile.model_validate(student_row)
        assert not hasattr(profile, "guardian_name")

    def test_unknown_role_rejected(self, student_row):
        """A role outside the enum fails to decode."""
        student_row["role"] = "janitor"
        with pytest.raises(ValidationError):
            Profile.model_validate(student_row)

    def test_first_name_required(self, student_row):
        """first_name is mandatory."""
        del student_row["first_name"]
        with pytest.raises(ValidationError):
            Profile.model_validate(student_row)

    def test_full_name(self, student_row):
        """full_name joins first and last name, skipping blanks."""
        assert Profile.model_validate(student_row).full_name == "Asha Verma"
        student_row["last_name"] = None
        assert Profile.model_validate(student_row).full_name == "Asha"


class TestAuthStateVariants:
    """AuthState variants."""

    def test_kinds(self, student_row):
        """Each variant carries its discriminator."""
        profile = Profile.model_validate(student_row)
        assert Initial().kind == "initial"
        assert Loading().kind == "loading"
        assert Success(profile=profile).kind == "success"
        assert Error(message="boom").kind == "error"

    def test_states_compare_by_value(self):
        """States with equal fields are equal."""
        assert Initial() == Initial()
        assert Error(message="x") == Error(message="x")
        assert Error(message="x") != Error(message="y")

    def test_states_are_immutable(self):
        """States cannot be mutated after creation."""
        state = Error(message="x")
        with pytest.raises(ValidationError):
            state.message = "y"
