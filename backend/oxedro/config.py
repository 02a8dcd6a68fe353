"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Supabase ─────────────────────────────────────────────────────────────
    # Project URL + anon key from the Supabase dashboard (Settings → API).
    # Left blank, the service starts but every backend-bound route answers 503.
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""

    # Table holding one institutional record per member.
    PROFILES_TABLE: str = "profiles"

    # ── Screens ──────────────────────────────────────────────────────────────
    APP_TITLE: str = "Oxedro ERP"
    APP_SUBTITLE: str = "Educational Institute Management"

    # ── CORS ─────────────────────────────────────────────────────────────────
    # Comma-separated list of allowed origins.
    # Dev default allows localhost. Production: set in .env.prod
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ── Logging ──────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def backend_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)


settings = Settings()
