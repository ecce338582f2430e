"""HTML directory listings.

``list_entries`` builds the rows for one directory, ``render_listing`` feeds
them through the bundled Jinja2 template. Link paths are percent-encoded so
that each one resolves back to the entry it was built from.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from .errors import FileAccessError, RenderError


logger = logging.getLogger("sfz.listing")

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
LISTING_TEMPLATE = "listing.html"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


@dataclass(frozen=True, slots=True)
class DirEntry:
    name: str
    link_path: str


def _relative_posix(path: Path, base: Path) -> str:
    rel = path.relative_to(base).as_posix()
    return "" if rel == "." else rel


def _link(rel: str) -> str:
    return "/" + quote(rel, safe="/")


def display_name(dir_path: Path, root_dir: Path) -> str:
    """Heading for ``dir_path``: its path below the root's parent plus ``/``."""

    base = root_dir.parent
    rel = _relative_posix(dir_path, base)
    return f"{rel}/" if rel else "/"


def list_entries(dir_path: Path, root_dir: Path) -> list[DirEntry]:
    entries: list[DirEntry] = []
    if dir_path != root_dir:
        parent = _relative_posix(dir_path.parent, root_dir)
        entries.append(DirEntry(name="..", link_path=_link(parent)))

    try:
        with os.scandir(dir_path) as it:
            children = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise FileAccessError.from_exc(exc) from exc

    for child in children:
        try:
            rel = _relative_posix(Path(child.path), root_dir)
            name = child.name + "/" if child.is_dir() else child.name
            # undecodable names fail here and are left out
            link_path = _link(rel)
        except (OSError, ValueError):
            logger.debug("event=listing_skip entry=%r", child.path, exc_info=True)
            continue
        entries.append(DirEntry(name=name, link_path=link_path))
    return entries


def render_listing(
    dir_path: Path,
    root_dir: Path,
    *,
    env: Environment | None = None,
) -> bytes:
    """Render the listing page for ``dir_path``.

    Raises :class:`FileAccessError` when the directory cannot be read and
    :class:`RenderError` when the template fails.
    """

    entries = list_entries(dir_path, root_dir)
    try:
        template = (env or _env).get_template(LISTING_TEMPLATE)
        page = template.render(dir_name=display_name(dir_path, root_dir), files=entries)
    except TemplateError as exc:
        raise RenderError(str(exc)) from exc
    return page.encode("utf-8")


def render_error_page(error: RenderError) -> bytes:
    return f"500 Internal server error: {error.message}".encode("utf-8")


__all__ = ["DirEntry", "display_name", "list_entries", "render_listing", "render_error_page"]
