from pathlib import Path

from sfz.mime import DIRECTORY_TYPE, FALLBACK_TYPE, guess_type
from sfz.resolver import Target, TargetKind


def _file(name: str) -> Target:
    return Target(path=Path("/srv") / name, kind=TargetKind.FILE)


def test_directory_is_always_html():
    target = Target(path=Path("/srv/assets.js"), kind=TargetKind.DIRECTORY)
    assert guess_type(target) == DIRECTORY_TYPE == "text/html; charset=utf-8"


def test_known_extensions():
    assert guess_type(_file("a.txt")) == "text/plain"
    assert guess_type(_file("index.html")) == "text/html"
    assert guess_type(_file("style.css")) == "text/css"
    assert guess_type(_file("app.js")) == "application/javascript"
    assert guess_type(_file("logo.png")) == "image/png"


def test_extension_lookup_is_case_insensitive():
    assert guess_type(_file("PHOTO.JPG")) == "image/jpeg"


def test_unknown_or_missing_extension_falls_back_to_plain_text():
    assert guess_type(_file("Makefile")) == FALLBACK_TYPE == "text/plain"
    assert guess_type(_file("data.unknownext")) == "text/plain"
    assert guess_type(_file(".bashrc")) == "text/plain"
