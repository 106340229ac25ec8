# Entry lister: immediate children of a directory with per-entry metadata.
# Created: 2026-10-19
#
# Every sub-directory triggers its own recursive size walk. That is the price of
# showing folder totals and is acceptable for interactive use.

from __future__ import annotations

import logging
import os
from pathlib import Path

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.models import Entry, EntryKind, Listing
from fileexplorer.core.paths import relative_to_root, resolve_user_path
from fileexplorer.core.result import Err, Ok, Result, internal, not_found
from fileexplorer.core.sizes import DirectorySizer

logger = logging.getLogger(__name__)

DIRECTORY_NOT_FOUND = "Directory not found."


def entry_from_dirent(
    ctx: ExplorerContext, dirent: os.DirEntry, sizer: DirectorySizer
) -> Entry:
    """Build an Entry for *dirent*; directories get their recursive size."""
    rel_path = relative_to_root(ctx, Path(dirent.path))
    try:
        is_dir = dirent.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False

    if is_dir:
        return Entry(dirent.name, EntryKind.DIRECTORY, sizer(dirent.path), rel_path)

    try:
        size = dirent.stat(follow_symlinks=False).st_size
    except OSError as e:
        logger.debug("Could not stat %s: %s", dirent.path, e.strerror or e)
        size = 0
    return Entry(dirent.name, EntryKind.FILE, size, rel_path)


def browse(ctx: ExplorerContext, rel_path: str | None = "") -> Result[Listing]:
    """List the directory at *rel_path* (relative to the root)."""
    resolved = resolve_user_path(ctx, rel_path)
    if isinstance(resolved, Err):
        return resolved
    directory = resolved.value

    if not directory.is_dir():
        return not_found(DIRECTORY_NOT_FOUND)

    listing = Listing(path=rel_path or "")
    sizer = DirectorySizer()
    try:
        with os.scandir(directory) as it:
            for dirent in it:
                listing.entries.append(entry_from_dirent(ctx, dirent, sizer))
    except PermissionError:
        logger.info("Permission denied listing %s", directory)
        return internal("Permission denied.")
    except OSError as e:
        logger.error("Failed to list %s: %s", directory, e)
        return internal(e.strerror or "Could not read directory.")

    logger.debug(
        "Browsed %s: %d files, %d folders, %d bytes",
        directory,
        listing.file_count,
        listing.folder_count,
        listing.total_size,
    )
    return Ok(listing)
