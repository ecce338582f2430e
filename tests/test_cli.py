import pytest

import sfz.__main__ as cli


@pytest.fixture
def captured_run(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    for name in ("SFZ_HOST", "SFZ_PORT", "SFZ_CORS", "SFZ_ROOT", "SFZ_STATUS_CODES"):
        monkeypatch.delenv(name, raising=False)
    return calls


def test_main_runs_uvicorn_with_config(captured_run, site_root):
    assert cli.main([str(site_root), "--port", "9123", "--cors", "--host", "0.0.0.0"]) == 0
    app, kwargs = captured_run[0]
    cfg = app.state.config
    assert cfg.root_dir == site_root.resolve()
    assert cfg.cors is True
    assert (kwargs["host"], kwargs["port"]) == ("0.0.0.0", 9123)
    assert kwargs["server_header"] is False


def test_main_rejects_missing_root(captured_run, tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing")]) == 2
    assert "not a directory" in capsys.readouterr().err
    assert captured_run == []


def test_main_rejects_bad_port(captured_run, site_root, capsys):
    assert cli.main([str(site_root), "--port", "70000"]) == 2
    assert "port out of range" in capsys.readouterr().err


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.path is None
    assert args.cors is None
    assert args.status_codes is None
