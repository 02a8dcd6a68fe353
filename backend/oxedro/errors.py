"""Auth error taxonomy.

Every failure of a login attempt ends up as one of these. The gateway never
lets a raw client/network exception escape; it wraps it in the matching
subclass and keeps the provider's message when there is one.
"""

from typing import Optional


class AuthError(Exception):
    """Base class for login failures. ``str(err)`` is the user-facing message."""

    default_message = ""

    def __init__(self, message: Optional[str] = None):
        self.message = (message or "").strip() or self.default_message
        super().__init__(self.message)


class FormValidationError(AuthError):
    """Local, pre-network check failed (blank fields)."""

    default_message = "Please fill all fields"


class AccountNotFound(AuthError):
    """Profile lookup returned no match, an ambiguous match, or failed."""

    default_message = "Account not found"


class InvalidCredentials(AuthError):
    """Auth provider rejected the password, or verification hit a transport error."""

    default_message = "Invalid credentials"


class SessionLookupFailure(AuthError):
    """Resolving the current session's profile failed. Logged, never shown."""

    default_message = "Session lookup failed"


class LoginInProgressError(AuthError):
    """A login was submitted while another one is still in flight."""

    default_message = "A login attempt is already in progress"
