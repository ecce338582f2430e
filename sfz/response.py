from __future__ import annotations

from dataclasses import dataclass, field

from . import __version__

SERVER_VERSION = f"sfz/{__version__}"
CORS_ALLOW_HEADERS = ("Range", "Content-Type", "Accept", "Origin")


@dataclass(slots=True)
class ServedResponse:
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    status_code: int = 200


def build_headers(body: bytes, content_type: str, *, cors: bool) -> dict[str, str]:
    headers = {
        "Content-Type": content_type,
        "Content-Length": str(len(body)),
        "Server": SERVER_VERSION,
    }
    if cors:
        headers["Access-Control-Allow-Origin"] = "*"
        headers["Access-Control-Allow-Headers"] = ", ".join(CORS_ALLOW_HEADERS)
    return headers


def assemble(
    body: bytes,
    content_type: str,
    *,
    cors: bool,
    status_code: int = 200,
) -> ServedResponse:
    """Attach the fixed header set to ``body``; never chunked."""

    return ServedResponse(
        body=body,
        headers=build_headers(body, content_type, cors=cors),
        status_code=status_code,
    )


__all__ = ["SERVER_VERSION", "CORS_ALLOW_HEADERS", "ServedResponse", "build_headers", "assemble"]
