import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    max_upload_size_mb: int = 5
    cors_origins: list[str] = [
        "http://localhost:3000",
        "https://cvgenius.ie",
        "https://www.cvgenius.ie",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # ATS analysis settings
    min_cv_length: int = 100
    rate_limit: str = "10/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
