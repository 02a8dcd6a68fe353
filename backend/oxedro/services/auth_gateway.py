"""Auth gateway — resolves a unique id to an account and verifies it against Supabase Auth.

Sign-in is a two-step flow:
  1. Look up the active profile whose ``unique_id`` matches (exactly one row).
  2. Verify the password with the auth provider, using that profile's email.

The profile from step 1 is what the caller gets back; it is not re-read
after verification. No exception from the client escapes this module:
sign-in failures come back inside a ``SignInResult``, session lookups
degrade to ``None``, and sign-out is fire-and-forget.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from oxedro.errors import AuthError, AccountNotFound, InvalidCredentials, SessionLookupFailure
from oxedro.schemas.profile import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInResult:
    profile: Optional[Profile] = None
    error: Optional[AuthError] = None

    @property
    def is_success(self) -> bool:
        return self.profile is not None and self.error is None


class AuthGateway:
    """Wraps the hosted account/session store and the ``profiles`` table.

    ``client`` is a Supabase ``AsyncClient`` (or anything exposing the same
    ``table(...).select(...).eq(...).execute()`` and ``auth`` surface).
    """

    def __init__(self, client: Any, profiles_table: str = "profiles"):
        self._client = client
        self._profiles_table = profiles_table
        self._session = None
        # Keeps is_logged_in() network-free; the provider reports sign-in,
        # sign-out, refresh and expiry through this stream.
        client.auth.on_auth_state_change(self._on_auth_state_change)

    def _on_auth_state_change(self, event, session) -> None:
        logger.debug(f"Auth event {event}")
        self._session = session

    async def _fetch_single_profile(self, **filters) -> Profile:
        """Select from profiles with equality filters and decode exactly one row."""
        query = self._client.table(self._profiles_table).select("*")
        for column, value in filters.items():
            query = query.eq(column, value)
        response = await query.execute()

        rows = response.data or []
        if len(rows) != 1:
            logger.info(f"Profile lookup {filters} matched {len(rows)} rows")
            raise AccountNotFound()
        return Profile.model_validate(rows[0])

    # ── Operations ──────────────────────────────────────────────────────────

    async def sign_in(self, unique_id: str, password: str) -> SignInResult:
        """Resolve ``unique_id`` (already upper-cased by the caller) and verify ``password``."""
        try:
            profile = await self._fetch_single_profile(unique_id=unique_id, is_active=True)
        except AccountNotFound as e:
            return SignInResult(error=e)
        except Exception as e:
            logger.warning(f"Profile lookup for {unique_id} failed: {e}")
            return SignInResult(error=AccountNotFound(str(e)))

        try:
            await self._client.auth.sign_in_with_password(
                {"email": profile.email, "password": password}
            )
        except Exception as e:
            logger.info(f"Credential verification for {unique_id} rejected: {e}")
            return SignInResult(error=InvalidCredentials(str(e)))

        logger.info(f"Signed in {unique_id} ({profile.role.value})")
        return SignInResult(profile=profile)

    async def get_current_profile(self) -> Optional[Profile]:
        """Profile of the current session, or None when signed out or on any failure."""
        try:
            return await self._resolve_session_profile()
        except SessionLookupFailure as e:
            logger.warning(f"Treating session as signed out: {e}")
            return None

    async def _resolve_session_profile(self) -> Optional[Profile]:
        try:
            session = await self._client.auth.get_session()
            if session is None:
                return None
            user = getattr(session, "user", None)
            if user is None:
                return None
            return await self._fetch_single_profile(id=user.id)
        except Exception as e:
            raise SessionLookupFailure(f"{type(e).__name__}: {e}") from e

    async def sign_out(self) -> None:
        try:
            await self._client.auth.sign_out()
        except Exception:
            logger.exception("Sign-out failed")

    def is_logged_in(self) -> bool:
        """Cached check; may lag a server-side revocation."""
        return self._session is not None
