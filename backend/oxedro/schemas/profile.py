"""Profile schema — one institutional member as stored in the ``profiles`` table."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class UserRole(str, Enum):
    SUPER_ADMIN = "superadmin"
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Profile(BaseModel):
    """Read-only view of a member record. Created and updated by the backend only."""

    id: str  # matches the auth user id
    unique_id: str  # institution-assigned, e.g. TIME25ST9367
    email: str  # auth principal
    phone: Optional[str] = None
    first_name: str
    last_name: Optional[str] = None
    role: UserRole
    address: Optional[str] = None
    sex: Optional[Gender] = None
    blood_group: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"
        frozen = True

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
