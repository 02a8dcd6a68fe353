"""Home router — landing screen shown after a successful login."""

from fastapi import APIRouter, Depends

from oxedro.config import settings
from oxedro.middleware.auth import get_current_profile
from oxedro.schemas.home import HomeResponse
from oxedro.schemas.profile import Profile

router = APIRouter(prefix="/api/home", tags=["home"])


@router.get("", response_model=HomeResponse)
def home(profile: Profile = Depends(get_current_profile)):
    return HomeResponse(
        title=settings.APP_TITLE,
        subtitle=settings.APP_SUBTITLE,
        greeting=f"Welcome back, {profile.full_name}",
        unique_id=profile.unique_id,
        role=profile.role,
        avatar_url=profile.avatar_url,
    )
