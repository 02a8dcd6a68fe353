"""Auth router — the login screen: form, submit, session and sign-out."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from oxedro.controllers.login_controller import LoginController
from oxedro.errors import LoginInProgressError
from oxedro.middleware.auth import get_auth_gateway, get_login_controller, get_current_profile
from oxedro.schemas.auth import LoginRequest, LoginFormResponse, SessionResponse
from oxedro.schemas.auth_state import AuthStateModel, Error
from oxedro.schemas.profile import Profile
from oxedro.services.auth_gateway import AuthGateway

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _form(controller: LoginController) -> LoginFormResponse:
    return LoginFormResponse(
        unique_id=controller.unique_id,
        password_visible=controller.password_visible,
    )


@router.post("/login", response_model=AuthStateModel)
async def login(req: LoginRequest, controller: LoginController = Depends(get_login_controller)):
    """Submit the login form.

    Always answers 200 with the resulting state; an ``error`` state is
    acknowledged (reset to ``initial``) once it is in the response so the
    form can be retried straight away.
    """
    # Checked before touching the form so an in-flight attempt keeps its fields.
    if controller.is_loading:
        raise HTTPException(status_code=409, detail=str(LoginInProgressError()))

    controller.set_unique_id(req.unique_id)
    controller.set_password(req.password)
    state = await controller.login()

    if isinstance(state, Error):
        controller.reset_auth_state()
    return state


@router.get("/state", response_model=AuthStateModel)
def get_state(controller: LoginController = Depends(get_login_controller)):
    """Current login state."""
    return controller.state


@router.post("/reset", response_model=AuthStateModel)
def reset_state(controller: LoginController = Depends(get_login_controller)):
    controller.reset_auth_state()
    return controller.state


@router.get("/form", response_model=LoginFormResponse)
def get_form(controller: LoginController = Depends(get_login_controller)):
    return _form(controller)


@router.post("/form/password-visibility", response_model=LoginFormResponse)
def toggle_password_visibility(controller: LoginController = Depends(get_login_controller)):
    controller.toggle_password_visibility()
    return _form(controller)


@router.get("/session", response_model=SessionResponse)
def get_session(gateway: AuthGateway = Depends(get_auth_gateway)):
    """Whether a session is held locally. No network call."""
    return SessionResponse(logged_in=gateway.is_logged_in())


@router.get("/me", response_model=Profile)
def get_me(profile: Profile = Depends(get_current_profile)):
    """Get current member profile."""
    return profile


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    gateway: AuthGateway = Depends(get_auth_gateway),
    controller: LoginController = Depends(get_login_controller),
):
    """Sign out (best effort) and re-arm the login form."""
    await gateway.sign_out()
    controller.reset_auth_state()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
