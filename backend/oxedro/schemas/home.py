"""Home screen schema."""

from typing import Optional

from pydantic import BaseModel

from oxedro.schemas.profile import UserRole


class HomeResponse(BaseModel):
    title: str
    subtitle: str
    greeting: str
    unique_id: str
    role: UserRole
    avatar_url: Optional[str] = None
