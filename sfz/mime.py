from __future__ import annotations

import mimetypes

from .resolver import Target

DIRECTORY_TYPE = "text/html; charset=utf-8"
FALLBACK_TYPE = "text/plain"

# Built-in table only; the host's mime.types files are not consulted.
_db = mimetypes.MimeTypes()
_db.add_type("application/javascript", ".js")
_db.add_type("application/javascript", ".mjs")
_db.add_type("text/markdown", ".md")
_db.add_type("application/wasm", ".wasm")
EXTENSION_TYPES: dict[str, str] = dict(_db.types_map[True])
del _db


def guess_type(target: Target) -> str:
    if target.is_dir:
        return DIRECTORY_TYPE
    suffix = target.path.suffix.lower()
    if not suffix:
        return FALLBACK_TYPE
    return EXTENSION_TYPES.get(suffix, FALLBACK_TYPE)


__all__ = ["DIRECTORY_TYPE", "FALLBACK_TYPE", "EXTENSION_TYPES", "guess_type"]
