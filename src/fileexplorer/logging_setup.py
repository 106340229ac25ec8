# Console logging with Rich.
# Created: 2026-10-19

from __future__ import annotations

import logging

from rich.logging import RichHandler

# Third-party loggers that are chatty at INFO.
_QUIET_LOGGERS = ("uvicorn.access", "multipart", "python_multipart")


def setup_logging(level: str = "INFO") -> None:
    """Route all stdlib logging through a single RichHandler on the root logger."""
    handler = RichHandler(
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
