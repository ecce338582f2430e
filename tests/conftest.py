from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:  # pragma: no cover - path setup
    sys.path.insert(0, str(ROOT_DIR))

from sfz.api import create_app
from sfz.config import ServerConfig


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hi")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.html").write_text("<p>b</p>", encoding="utf-8")
    return root


@pytest.fixture
def make_client(site_root: Path):
    def _make(**overrides) -> TestClient:
        cfg = ServerConfig(root_dir=overrides.pop("root_dir", site_root), **overrides)
        return TestClient(create_app(cfg))

    return _make
