"""Per-request pipeline: resolve, read or list, classify, assemble.

Every :class:`ServeError` is contained here and turned into a text body so a
complete response goes back for any accepted request.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ServerConfig
from .errors import RenderError, ServeError
from .listing import render_error_page, render_listing
from .metrics import SFZ_REQUEST_ERRORS_TOTAL, SFZ_REQUESTS_TOTAL
from .mime import DIRECTORY_TYPE, FALLBACK_TYPE, guess_type
from .reader import read_file
from .resolver import Target, resolve_path
from .response import ServedResponse, assemble


logger = logging.getLogger("sfz.handler")


@dataclass(slots=True)
class RequestContext:
    raw_path: str | bytes
    resolved: Path | None = None


def error_body(error: ServeError) -> bytes:
    return f"Error: {error.message}".encode("utf-8")


def _record_error(ctx: RequestContext, error: ServeError) -> None:
    SFZ_REQUEST_ERRORS_TOTAL.labels(error=type(error).__name__).inc()
    logger.warning(
        "event=serve_error path=%s error=%s status=%s",
        ctx.raw_path,
        error.message,
        error.status_code,
        exc_info=error if isinstance(error, RenderError) else None,
    )


def handle_request(raw_path: str | bytes, config: ServerConfig) -> ServedResponse:
    ctx = RequestContext(raw_path=raw_path)
    status = 200

    target: Target | None = None
    try:
        target = resolve_path(raw_path, config.root_dir)
        ctx.resolved = target.path
        SFZ_REQUESTS_TOTAL.labels(kind=target.kind.value).inc()
        if target.is_dir:
            body = render_listing(target.path, config.root_dir)
        else:
            body = read_file(target.path)
        content_type = guess_type(target)
    except RenderError as exc:
        _record_error(ctx, exc)
        body = render_error_page(exc)
        content_type = DIRECTORY_TYPE
        if config.status_codes:
            status = exc.status_code
    except ServeError as exc:
        _record_error(ctx, exc)
        body = error_body(exc)
        content_type = FALLBACK_TYPE
        if config.status_codes:
            status = exc.status_code

    logger.debug(
        "event=serve path=%s resolved=%s kind=%s bytes=%d status=%d",
        ctx.raw_path,
        ctx.resolved,
        target.kind.value if target is not None else "-",
        len(body),
        status,
    )
    return assemble(body, content_type, cors=config.cors, status_code=status)


__all__ = ["RequestContext", "error_body", "handle_request"]
