# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import Request

from fileexplorer.config import Settings
from fileexplorer.core.context import ExplorerContext


def get_context(request: Request) -> ExplorerContext:
    """The explorer context the app was built with (see ``create_app``)."""
    return request.app.state.context


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
