"""
Tests for the process entrypoint (main.main): fatal missing password, uvicorn wiring.
"""

from __future__ import annotations

import pytest

import main as entrypoint


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No .env and no probe variables from the outer environment."""
    monkeypatch.chdir(tmp_path)
    for name in ("QBITTORRENT_HOST", "QBITTORRENT_USERNAME", "QBITTORRENT_PASSWORD", "QBITTORRENT_TIMEOUT", "PORT", "ADDRESS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_password_exits_nonzero(clean_env):
    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main()
    assert exc_info.value.code == 1


def test_bad_optional_values_still_serve(clean_env):
    """Invalid port / address degrade to defaults and the server starts."""
    import uvicorn

    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    clean_env.setattr(uvicorn, "run", fake_run)
    clean_env.setenv("QBITTORRENT_PASSWORD", "adminadmin")
    clean_env.setenv("PORT", "0")
    clean_env.setenv("ADDRESS", "everywhere")

    entrypoint.main()

    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9000
    routes = {route.path for route in calls["app"].routes}
    assert {"/healthz", "/readyz"} <= routes


@pytest.fixture
def fake_uvicorn(clean_env):
    """Replace uvicorn.run with a recorder; returns the recorded kwargs."""
    import uvicorn

    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    clean_env.setattr(uvicorn, "run", fake_run)
    clean_env.setenv("QBITTORRENT_PASSWORD", "adminadmin")
    return calls


def test_mistyped_host_still_serves(clean_env, fake_uvicorn):
    """A bad QBITTORRENT_HOST does not stop startup; both endpoints answer 503."""
    from fastapi.testclient import TestClient

    clean_env.setenv("QBITTORRENT_HOST", "http://qbittorrent:80a80")

    entrypoint.main()

    http = TestClient(fake_uvicorn["app"])
    assert http.get("/healthz").status_code == 503
    assert http.get("/readyz").status_code == 503


@pytest.mark.parametrize(
    "raw,expected",
    [("WARN", "warning"), ("verbose", "info"), ("Debug", "debug"), ("", "info"), ("fatal", "critical")],
)
def test_log_level_passed_to_uvicorn_is_valid(clean_env, fake_uvicorn, raw, expected):
    """Unknown LOG_LEVEL values never reach uvicorn; they degrade to info."""
    clean_env.setenv("LOG_LEVEL", raw)

    entrypoint.main()

    assert fake_uvicorn["log_level"] == expected
