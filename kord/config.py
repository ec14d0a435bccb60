"""Configuration loaded from environment (.env / .env.local) and defaults."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Locate the project root env files regardless of CWD
_THIS_DIR = Path(__file__).resolve().parent          # kord/
_PROJECT_ROOT = _THIS_DIR.parent
_ENV_FILES = tuple(
    str(p) for p in (_PROJECT_ROOT / ".env", _PROJECT_ROOT / ".env.local") if p.exists()
) or (".env", ".env.local")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream chat-completion API (OpenRouter)
    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    kord_model: str = "mistralai/mistral-7b-instruct:free"

    # Attribution headers sent to OpenRouter
    kord_http_referer: str = "http://localhost:3000"
    kord_app_title: str = "Kord Legal"

    # Seconds before an upstream call is abandoned
    kord_request_timeout: float = 60.0

    # Multiplier applied to every investigation step delay (0 = no waiting)
    kord_step_delay_scale: float = 1.0

    kord_log_level: str = "INFO"

    # CORS origins (comma-separated). Defaults to localhost dev.
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    cors_origin_regex: str | None = None

    port: int = 8000

    # Max upload size in bytes (default 10 MB)
    max_upload_bytes: int = 10 * 1024 * 1024

    @property
    def api_key(self) -> str | None:
        """Upstream key with accidental whitespace removed; None when blank."""
        if self.openrouter_api_key is None:
            return None
        key = self.openrouter_api_key.strip()
        return key or None

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_settings() -> Settings:
    return Settings()
