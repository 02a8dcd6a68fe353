"""Pydantic schemas."""

from oxedro.schemas.profile import Profile, UserRole, Gender
from oxedro.schemas.auth_state import AuthState, AuthStateModel, Initial, Loading, Success, Error

__all__ = [
    "Profile",
    "UserRole",
    "Gender",
    "AuthState",
    "AuthStateModel",
    "Initial",
    "Loading",
    "Success",
    "Error",
]
