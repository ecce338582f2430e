from __future__ import annotations

from pathlib import Path

from .errors import FileAccessError


def read_file(path: Path) -> bytes:
    """Return the whole content of ``path``."""

    try:
        with open(path, "rb") as fh:
            return fh.read()
    except (OSError, ValueError) as exc:
        raise FileAccessError.from_exc(exc) from exc


__all__ = ["read_file"]
