from __future__ import annotations

import os
from dataclasses import dataclass

LOG_FORMATS = ("text", "json")


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(o.strip().rstrip("/") for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from `MEASURESTORE_*` environment variables."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    log_format: str = "text"
    # Empty: no CORS middleware.
    cors_origins: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "Settings":
        port_raw = os.getenv("MEASURESTORE_PORT", str(cls.port))
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"MEASURESTORE_PORT must be an integer, got {port_raw!r}")

        log_format = os.getenv("MEASURESTORE_LOG_FORMAT", cls.log_format).strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"MEASURESTORE_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        return cls(
            host=os.getenv("MEASURESTORE_HOST", cls.host),
            port=port,
            log_level=os.getenv("MEASURESTORE_LOG_LEVEL", cls.log_level).upper(),
            log_format=log_format,
            cors_origins=_split_origins(os.getenv("MEASURESTORE_CORS_ORIGINS", "")),
        )
