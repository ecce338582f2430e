"""Map a raw request path onto the served filesystem tree."""
from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote_to_bytes

from .errors import DecodeError, ForbiddenPathError


class TargetKind(str, enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Target:
    path: Path
    kind: TargetKind

    @property
    def is_dir(self) -> bool:
        return self.kind is TargetKind.DIRECTORY


def decode_path(raw_path: str | bytes) -> str:
    """Drop the leading slash and percent-decode the rest as UTF-8.

    Malformed escapes such as ``%zz`` are kept literally; only byte
    sequences that are not UTF-8 are rejected.
    """

    if isinstance(raw_path, str):
        raw_path = raw_path.encode("utf-8")
    if raw_path.startswith(b"/"):
        raw_path = raw_path[1:]
    try:
        return unquote_to_bytes(raw_path).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"invalid utf-8 in request path: {exc}") from exc


def resolve_path(raw_path: str | bytes, root_dir: Path) -> Target:
    """Resolve ``raw_path`` under ``root_dir`` and classify it.

    A missing target is classified as a file; the read step reports it.
    """

    relative = decode_path(raw_path)
    root = os.path.normpath(str(root_dir))
    candidate = os.path.normpath(os.path.join(root, relative))
    if os.path.isabs(relative) or os.path.commonpath([root, candidate]) != root:
        raise ForbiddenPathError(f"path escapes served root: /{relative}")

    # os.path.isdir swallows every OSError; faults surface on read
    kind = TargetKind.DIRECTORY if os.path.isdir(candidate) else TargetKind.FILE
    return Target(path=Path(candidate), kind=kind)


__all__ = ["TargetKind", "Target", "decode_path", "resolve_path"]
