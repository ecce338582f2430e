"""Process-wide configuration for the file server."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888


def _coerce_int(value: str | None, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(str(value).strip() or default)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors: bool = False
    root_dir: Path = Path(".")
    status_codes: bool = False
    metrics_path: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= int(self.port) <= 65535:
            raise ValueError(f"port out of range: {self.port}")
        # frozen: resolve once through object.__setattr__
        object.__setattr__(self, "port", int(self.port))
        object.__setattr__(self, "root_dir", Path(self.root_dir).resolve())
        if self.metrics_path is not None:
            cleaned = self.metrics_path.strip()
            if cleaned and not cleaned.startswith("/"):
                cleaned = "/" + cleaned
            object.__setattr__(self, "metrics_path", cleaned or None)


def server_config(**overrides: Any) -> ServerConfig:
    """Build a :class:`ServerConfig` from ``SFZ_*`` variables.

    Keyword overrides whose value is not ``None`` take precedence over the
    environment.
    """

    values: dict[str, Any] = {
        "host": (os.getenv("SFZ_HOST") or DEFAULT_HOST).strip() or DEFAULT_HOST,
        "port": _coerce_int(os.getenv("SFZ_PORT"), DEFAULT_PORT),
        "cors": _env_bool("SFZ_CORS"),
        "root_dir": Path(os.getenv("SFZ_ROOT") or os.getcwd()),
        "status_codes": _env_bool("SFZ_STATUS_CODES"),
        "metrics_path": os.getenv("SFZ_METRICS_PATH") or None,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ServerConfig(**values)


__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "ServerConfig", "server_config"]
