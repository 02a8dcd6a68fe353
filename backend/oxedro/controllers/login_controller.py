"""Login controller — owns the login form and drives the AuthState machine."""

import asyncio
import logging
from typing import Callable

from oxedro.errors import FormValidationError, InvalidCredentials, LoginInProgressError
from oxedro.schemas.auth_state import AuthState, Initial, Loading, Success, Error
from oxedro.services.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

StateListener = Callable[[AuthState], None]


class LoginController:
    def __init__(self, gateway: AuthGateway):
        self._gateway = gateway
        self._state: AuthState = Initial()
        self._unique_id = ""
        self._password = ""
        self._password_visible = False
        self._listeners: list[StateListener] = []

    # ── Observable state ────────────────────────────────────────────────────

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def unique_id(self) -> str:
        return self._unique_id

    @property
    def password(self) -> str:
        return self._password

    @property
    def password_visible(self) -> bool:
        return self._password_visible

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` on every state transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: AuthState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ── Form ────────────────────────────────────────────────────────────────

    def set_unique_id(self, value: str) -> None:
        # Unique ids are upper-case by convention; the gateway relies on this.
        self._unique_id = value.upper()

    def set_password(self, value: str) -> None:
        self._password = value

    def toggle_password_visibility(self) -> None:
        self._password_visible = not self._password_visible

    # ── Actions ─────────────────────────────────────────────────────────────

    async def login(self) -> AuthState:
        """Validate the form, then sign in through the gateway.

        Blank fields fail locally without entering ``Loading``. A call made
        while another attempt is in flight raises ``LoginInProgressError``;
        the check and the ``Loading`` transition share one step of the event
        loop, so concurrent submits cannot both get through. A gateway
        failure or a cancelled attempt still ends in ``Error``.
        """
        if self.is_loading:
            raise LoginInProgressError()

        if not self._unique_id.strip() or not self._password.strip():
            self._set_state(Error(message=str(FormValidationError())))
            return self._state

        self._set_state(Loading())
        try:
            result = await self._gateway.sign_in(self._unique_id, self._password)
        except asyncio.CancelledError:
            # Never leave the guard held by an attempt that no longer exists.
            self._set_state(Error(message=InvalidCredentials.default_message))
            raise
        except Exception as e:
            logger.exception(f"Login for {self._unique_id} aborted")
            self._set_state(Error(message=str(InvalidCredentials(str(e)))))
            return self._state

        if result.is_success:
            self._set_state(Success(profile=result.profile))
        else:
            message = str(result.error or "") or InvalidCredentials.default_message
            logger.info(f"Login for {self._unique_id} failed: {message}")
            self._set_state(Error(message=message))
        return self._state

    def reset_auth_state(self) -> None:
        self._set_state(Initial())
