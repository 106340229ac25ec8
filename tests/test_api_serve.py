"""Tests for the app factory and server runner."""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from fileexplorer.api.serve import create_app, run_server
from fileexplorer.config import Settings


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


class TestAppStructure:
    def test_openapi_json(self, client):
        resp = client.get("/test/openapi.json")
        assert resp.status_code == 200
        data = resp.json()
        assert data["info"]["title"] == "File Explorer API"
        for route in ("/test/browse", "/test/search", "/test/download", "/test/upload"):
            assert route in data["paths"]

    def test_docs_page(self, client):
        assert client.get("/test/docs").status_code == 200

    def test_context_holds_canonical_root(self, test_app, home):
        assert test_app.state.context.root == home

    def test_custom_prefix(self, home):
        client = TestClient(create_app(Settings(home_directory=home, route_prefix="files")))
        assert client.get("/files/browse").status_code == 200
        assert client.get("/test/browse").status_code == 404

    def test_empty_prefix(self, home):
        client = TestClient(create_app(Settings(home_directory=home, route_prefix="")))
        assert client.get("/browse", params={"path": "docs"}).json()["totalSize"] == 5

    def test_no_spa_fallback(self, client):
        resp = client.get("/")
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class TestSecurityHeaders:
    def test_headers_present(self, client):
        resp = client.get("/test/browse")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in resp.headers

    def test_hsts_behind_https_proxy(self, client):
        resp = client.get("/test/browse", headers={"X-Forwarded-Proto": "https"})
        assert "max-age" in resp.headers["Strict-Transport-Security"]

    def test_headers_on_error_responses(self, client):
        with patch("fileexplorer.api.v1.files.browse", side_effect=RuntimeError("boom")):
            resp = client.get("/test/browse")
        assert resp.status_code == 500
        assert resp.headers["X-Content-Type-Options"] == "nosniff"


class TestCORS:
    def test_localhost_origin_allowed(self, client):
        resp = client.get("/test/browse", headers={"Origin": "http://localhost:3000"})
        assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_foreign_origin_not_allowed(self, client):
        resp = client.get("/test/browse", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in resp.headers

    def test_configured_origin_allowed(self, home):
        settings = Settings(home_directory=home, cors_allowed_origins=["https://files.example"])
        client = TestClient(create_app(settings))
        resp = client.get("/test/browse", headers={"Origin": "https://files.example"})
        assert resp.headers["access-control-allow-origin"] == "https://files.example"


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class TestRunServer:
    @patch("uvicorn.run")
    def test_runs_app(self, mock_run, settings):
        run_server(settings)
        mock_run.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 5120
        assert "ssl_certfile" not in kwargs

    @patch("uvicorn.run")
    def test_tls_options(self, mock_run, home, tmp_path):
        cert, key = tmp_path / "cert.pem", tmp_path / "key.pem"
        settings = Settings(home_directory=home, ssl_certfile=cert, ssl_keyfile=key)
        run_server(settings)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["ssl_certfile"] == str(cert)
        assert kwargs["ssl_keyfile"] == str(key)

    @patch("uvicorn.run")
    def test_dev_mode_uses_factory(self, mock_run, settings):
        run_server(settings, dev=True)
        args, kwargs = mock_run.call_args
        assert args[0] == "fileexplorer.api.serve:create_app"
        assert kwargs["factory"] is True
        assert kwargs["reload"] is True

    @patch("uvicorn.run")
    def test_dev_mode_exports_config_file(self, mock_run, settings, tmp_path):
        config = tmp_path / "other.json"
        config.write_text("{}")
        run_server(settings, dev=True, config_path=str(config))
        assert os.environ["FILEEXPLORER_CONFIG"] == str(config.resolve())
        assert os.environ["FILEEXPLORER_HOME_DIRECTORY"] == str(settings.home_directory)

    @patch("uvicorn.run")
    def test_dev_mode_without_config_leaves_env_alone(self, mock_run, settings):
        run_server(settings, dev=True)
        assert "FILEEXPLORER_CONFIG" not in os.environ

    @pytest.fixture(autouse=True)
    def _restore_env(self, monkeypatch):
        # Dev mode exports settings to the environment; make monkeypatch undo that.
        for var in (
            "FILEEXPLORER_HOME_DIRECTORY",
            "FILEEXPLORER_ROUTE_PREFIX",
            "FILEEXPLORER_CONFIG",
        ):
            monkeypatch.setenv(var, "")
            monkeypatch.delenv(var)
