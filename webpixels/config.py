# webpixels/config.py
import os
from dataclasses import dataclass, field

from .storage import DEFAULT_CATALOG_FILE


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)


@dataclass(frozen=True)
class Settings:
    # -------- Catalog ----------
    catalog_path: str = field(
        default_factory=lambda: os.getenv("WEBPIXELS_CATALOG_PATH", str(DEFAULT_CATALOG_FILE))
    )

    # -------- Server -----------
    host: str = field(default_factory=lambda: os.getenv("WEBPIXELS_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("WEBPIXELS_PORT", 8000))
    log_level: str = field(default_factory=lambda: os.getenv("WEBPIXELS_LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    return Settings()
