"""Login attempt lifecycle — a closed set of immutable states.

    Initial ──submit──▶ Loading ──▶ Success(profile)
       ▲                   │
       └──── reset ─── Error(message) ◀┘

Each variant carries a ``kind`` discriminator so a state can be returned
from a route as-is.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from oxedro.schemas.profile import Profile


class AuthState(BaseModel):
    class Config:
        frozen = True


class Initial(AuthState):
    """No attempt made yet, or the last error was acknowledged."""
    kind: Literal["initial"] = "initial"


class Loading(AuthState):
    """An attempt is in flight; the form must not be re-submitted."""
    kind: Literal["loading"] = "loading"


class Success(AuthState):
    """Credential verified; carries the profile read before verification."""
    kind: Literal["success"] = "success"
    profile: Profile


class Error(AuthState):
    """Attempt failed; ``message`` is shown once, then the state is reset."""
    kind: Literal["error"] = "error"
    message: str


AuthStateModel = Annotated[
    Union[Initial, Loading, Success, Error],
    Field(discriminator="kind"),
]
