"""Executable entrypoint: ``python -m sfz [PATH]``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable

import uvicorn

from . import __version__
from .api import create_app
from .config import server_config


logger = logging.getLogger("sfz")


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sfz",
        description="Serve files and directory listings from a local directory.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Root directory to serve (default: current directory).",
    )
    parser.add_argument("--host", "-b", default=None, help="Address to bind.")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port to listen on.")
    parser.add_argument(
        "--cors",
        "-c",
        action="store_true",
        default=None,
        help="Send Access-Control-Allow-* headers.",
    )
    parser.add_argument(
        "--status-codes",
        action="store_true",
        default=None,
        help="Answer errors with their real HTTP status instead of 200.",
    )
    parser.add_argument(
        "--metrics-path",
        default=None,
        help="Expose Prometheus metrics at this URL path.",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL") or "INFO",
        help="Logging level (default: INFO).",
    )
    parser.add_argument("--version", action="version", version=f"sfz {__version__}")
    return parser.parse_args(list(argv) if argv is not None else None)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    root = os.path.abspath(args.path) if args.path else None
    if root is not None and not os.path.isdir(root):
        print(f"[sfz] not a directory: {root}", file=sys.stderr)
        return 2
    try:
        cfg = server_config(
            host=args.host,
            port=args.port,
            cors=args.cors,
            root_dir=root,
            status_codes=args.status_codes,
            metrics_path=args.metrics_path,
        )
    except ValueError as exc:
        print(f"[sfz] invalid configuration: {exc}", file=sys.stderr)
        return 2

    logger.info("event=startup config=%r", cfg)
    print(f"Serving {cfg.root_dir} at http://{cfg.host}:{cfg.port}/")
    uvicorn.run(
        create_app(cfg),
        host=cfg.host,
        port=cfg.port,
        server_header=False,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
