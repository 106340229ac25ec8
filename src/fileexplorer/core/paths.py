# Path resolver: confines untrusted user paths to the explorer root.
# Created: 2026-10-19
#
# Raw string-prefix checks are not safe: "../" traversal, absolute inputs and sibling
# directories sharing a prefix ("/home/app" vs "/home/appendix") must all be rejected.
# Paths are canonicalized first and compared by segment.

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote as _percent_decode

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.result import Ok, Result, bad_request, forbidden

logger = logging.getLogger(__name__)

INVALID_PATH = "Invalid path."


def is_contained(root: Path, candidate: Path) -> bool:
    """True when *candidate* is *root* or a descendant of it by path components."""
    return candidate == root or root in candidate.parents


def resolve_user_path(
    ctx: ExplorerContext, user_input: str | None, *, unquote: bool = False
) -> Result[Path]:
    """Map *user_input* to a canonical absolute path under ``ctx.root``.

    Set *unquote* when the transport hands over percent-encoded text. Existence is
    not checked; callers decide what a missing path means for them.
    """
    raw = user_input or ""
    if unquote:
        raw = _percent_decode(raw)

    if "\x00" in raw:
        return bad_request(INVALID_PATH)

    try:
        candidate = (ctx.root / raw).resolve()
    except (OSError, RuntimeError, ValueError):
        logger.debug("Could not canonicalize %r", raw, exc_info=True)
        return bad_request(INVALID_PATH)

    if not is_contained(ctx.root, candidate):
        logger.info("Path traversal blocked: %r", raw)
        return forbidden()

    return Ok(candidate)


def relative_to_root(ctx: ExplorerContext, path: Path) -> str:
    """Render a path under the root as a root-relative string ("" for the root)."""
    rel = path.relative_to(ctx.root)
    return "" if rel == Path(".") else str(rel)
