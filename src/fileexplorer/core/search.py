# Search engine: recursive name search below a directory.
# Created: 2026-10-19

from __future__ import annotations

import logging
import os
from collections import deque

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.listing import DIRECTORY_NOT_FOUND, entry_from_dirent
from fileexplorer.core.models import SearchResult
from fileexplorer.core.paths import resolve_user_path
from fileexplorer.core.result import Err, Ok, Result, bad_request, not_found
from fileexplorer.core.sizes import DirectorySizer

logger = logging.getLogger(__name__)

QUERY_REQUIRED = "Query parameter is required."


def name_matches(name: str, query: str) -> bool:
    """Substring match using the platform's filename case rules."""
    return os.path.normcase(query) in os.path.normcase(name)


def search(
    ctx: ExplorerContext, query: str | None, rel_path: str | None = ""
) -> Result[SearchResult]:
    """Find every descendant of *rel_path* whose basename contains *query*.

    Subtrees that cannot be enumerated are skipped and the rest is still returned.
    Symlinked directories are reported but not descended into.
    """
    if not query or not query.strip():
        return bad_request(QUERY_REQUIRED)

    resolved = resolve_user_path(ctx, rel_path)
    if isinstance(resolved, Err):
        return resolved
    start = resolved.value

    if not start.is_dir():
        return not_found(DIRECTORY_NOT_FOUND)

    result = SearchResult(path=rel_path or "", query=query)
    sizer = DirectorySizer()
    queue: deque[str] = deque([os.fspath(start)])

    while queue:
        current = queue.popleft()
        try:
            with os.scandir(current) as it:
                children = list(it)
        except PermissionError:
            logger.debug("Permission denied: %s", current)
            continue
        except OSError as e:
            logger.warning("Skipping %s during search: %s", current, e.strerror or e)
            continue

        for dirent in children:
            if name_matches(dirent.name, query):
                result.matches.append(entry_from_dirent(ctx, dirent, sizer))
            try:
                if dirent.is_dir(follow_symlinks=False):
                    queue.append(dirent.path)
            except OSError:
                continue

    logger.debug("Search %r under %s: %d matches", query, start, len(result.matches))
    return Ok(result)
