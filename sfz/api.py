from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config import ServerConfig, server_config
from .handler import handle_request
from .response import SERVER_VERSION


logger = logging.getLogger("sfz.api")


def _raw_request_path(request: Request) -> bytes:
    raw = request.scope.get("raw_path")
    if raw:
        return raw.split(b"?", 1)[0]
    return quote(request.url.path, safe="/").encode("ascii")


def create_app(config: ServerConfig | None = None) -> FastAPI:
    cfg = config or server_config()
    logger.info(
        "stage=app_created root=%s cors=%s status_codes=%s metrics_path=%s",
        cfg.root_dir,
        "true" if cfg.cors else "false",
        "true" if cfg.status_codes else "false",
        cfg.metrics_path or "-",
    )

    app = FastAPI(title="sfz", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.config = cfg

    if cfg.metrics_path:

        @app.get(cfg.metrics_path, include_in_schema=False)
        def metrics() -> Response:
            return Response(
                generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
                headers={"Server": SERVER_VERSION},
            )

    # sync endpoint: filesystem work runs in the threadpool, one request per call
    @app.api_route("/{path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def serve(request: Request) -> Response:
        served = handle_request(_raw_request_path(request), request.app.state.config)
        return Response(
            content=served.body,
            status_code=served.status_code,
            headers=served.headers,
        )

    return app


__all__ = ["create_app"]
