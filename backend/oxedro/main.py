"""Oxedro ERP — FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oxedro.config import settings
from oxedro.controllers.login_controller import LoginController
from oxedro.routers import auth, home
from oxedro.services.auth_gateway import AuthGateway
from oxedro.services.backend_client import create_backend_client

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── CORS origins from env (supports dev localhost + production domain) ──────
_cors_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_SUBTITLE,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(home.router)


@app.on_event("startup")
async def on_startup():
    """Build the Supabase client, then the gateway and controller that share it."""
    if not settings.backend_configured:
        print("\n" + "="*60)
        print("  ⚠  SUPABASE NOT CONFIGURED")
        print("  Set these in backend/.env:")
        print("    SUPABASE_URL=https://<project>.supabase.co")
        print("    SUPABASE_ANON_KEY=<anon key>")
        print("  and restart. Login routes answer 503 until then.")
        print("="*60 + "\n")
        return

    client = await create_backend_client(settings)
    gateway = AuthGateway(client, profiles_table=settings.PROFILES_TABLE)
    app.state.auth_gateway = gateway
    app.state.login_controller = LoginController(gateway)
    logger.info("Auth gateway ready")


@app.on_event("shutdown")
async def on_shutdown():
    gateway = getattr(app.state, "auth_gateway", None)
    if gateway is not None and gateway.is_logged_in():
        await gateway.sign_out()


@app.get("/")
def root():
    return {
        "name": settings.APP_TITLE,
        "version": "1.0.0",
        "docs": "/docs",
        "backend_configured": settings.backend_configured,
    }


@app.get("/health")
def health():
    return {
        "status": "ok",
        "backend_configured": settings.backend_configured,
        "gateway_ready": getattr(app.state, "auth_gateway", None) is not None,
    }
