"""Request dependencies for the login/home routes.

The gateway and controller are built by the startup hook and live on
``app.state``; tests swap them through ``app.dependency_overrides``.
"""

from fastapi import Depends, HTTPException, Request, status

from oxedro.controllers.login_controller import LoginController
from oxedro.schemas.profile import Profile
from oxedro.services.auth_gateway import AuthGateway


def _backend_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Backend not configured",
    )


def get_auth_gateway(request: Request) -> AuthGateway:
    gateway = getattr(request.app.state, "auth_gateway", None)
    if gateway is None:
        raise _backend_unavailable()
    return gateway


def get_login_controller(request: Request) -> LoginController:
    controller = getattr(request.app.state, "login_controller", None)
    if controller is None:
        raise _backend_unavailable()
    return controller


async def get_current_profile(gateway: AuthGateway = Depends(get_auth_gateway)) -> Profile:
    profile = await gateway.get_current_profile()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return profile
