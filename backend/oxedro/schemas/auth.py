"""Auth request/response schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    unique_id: str = ""
    password: str = ""


class LoginFormResponse(BaseModel):
    # The password itself is never echoed back.
    unique_id: str
    password_visible: bool


class SessionResponse(BaseModel):
    logged_in: bool
