# Shared fixtures: a small home directory tree and an app serving it.
# Created: 2026-10-19

import sys

import pytest
from fastapi.testclient import TestClient

from fileexplorer.api.serve import create_app
from fileexplorer.config import Settings
from fileexplorer.core import ExplorerContext


@pytest.fixture
def home(tmp_path):
    """Home directory with docs/a.txt ("hi") and docs/sub/b.txt ("xyz")."""
    root = tmp_path / "srv"
    (root / "docs" / "sub").mkdir(parents=True)
    (root / "docs" / "a.txt").write_bytes(b"hi")
    (root / "docs" / "sub" / "b.txt").write_bytes(b"xyz")
    return root.resolve()


@pytest.fixture
def ctx(home):
    return ExplorerContext.from_directory(home)


@pytest.fixture
def settings(home):
    return Settings(home_directory=home)


@pytest.fixture
def test_app(settings):
    return create_app(settings)


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    # pytest's tmp-dir cleanup uses shutil.rmtree, which recurses per level on
    # Python < 3.12; the deep-tree size test would otherwise crash teardown.
    # Raised only after all tests ran, so the tests see the default limit.
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
