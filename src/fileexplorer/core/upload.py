# Upload receiver: stream a client-supplied file into a directory under the root.
# Created: 2026-10-19
#
# Policy:
#   - An existing file with the same name is overwritten without prompt.
#   - No size limit is enforced here; limits belong to the HTTP layer.

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.listing import DIRECTORY_NOT_FOUND
from fileexplorer.core.models import UploadReceipt
from fileexplorer.core.paths import is_contained, relative_to_root, resolve_user_path
from fileexplorer.core.result import Err, Ok, Result, bad_request, forbidden, internal, not_found

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 64 * 1024
EMPTY_UPLOAD = "No file uploaded or file is empty."
INVALID_FILE_NAME = "Invalid file name."


def clean_filename(filename: str | None) -> str:
    """Strip any directory components a client put in the file name.

    Both ``/`` and ``\\`` count as separators so Windows-style names are handled on
    every platform.
    """
    return (filename or "").replace("\\", "/").rsplit("/", 1)[-1]


def receive_upload(
    ctx: ExplorerContext,
    rel_dir: str | None,
    filename: str | None,
    source: BinaryIO | None,
    *,
    chunk_size: int = COPY_CHUNK_SIZE,
) -> Result[UploadReceipt]:
    """Copy *source* into ``<rel_dir>/<filename>`` in bounded chunks."""
    if source is None:
        return bad_request(EMPTY_UPLOAD)

    # Peek before touching the filesystem so an empty upload never truncates a file.
    first = source.read(chunk_size)
    if not first:
        return bad_request(EMPTY_UPLOAD)

    name = clean_filename(filename)
    if name in ("", ".", "..") or "\x00" in name:
        return bad_request(INVALID_FILE_NAME)

    resolved = resolve_user_path(ctx, rel_dir)
    if isinstance(resolved, Err):
        return resolved
    directory = resolved.value

    if not directory.is_dir():
        return not_found(DIRECTORY_NOT_FOUND)

    dest = directory / name
    try:
        target = dest.resolve()
    except (OSError, RuntimeError) as e:
        # RuntimeError is how Python < 3.13 reports a symlink loop.
        logger.warning("Cannot resolve upload target %s: %s", dest, e)
        return internal("Could not save the uploaded file.")
    # A pre-existing symlink with this name must not redirect the write outside the root.
    if not is_contained(ctx.root, target):
        logger.info("Upload target escapes root via symlink: %s", dest)
        return forbidden()

    opened = False
    written = 0
    try:
        with open(dest, "wb") as out:
            opened = True
            chunk = first
            while chunk:
                out.write(chunk)
                written += len(chunk)
                chunk = source.read(chunk_size)
    except OSError as e:
        logger.error("Failed to save upload to %s: %s", dest, e)
        if opened:
            _discard(dest)
        return internal(e.strerror or "Could not save the uploaded file.")
    except BaseException:
        if opened:
            _discard(dest)
        raise

    logger.info("Uploaded %s (%d bytes)", dest, written)
    return Ok(UploadReceipt(file_name=name, size=written, rel_path=relative_to_root(ctx, dest)))


def _discard(path: Path) -> None:
    """Remove a partially written upload."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial upload %s: %s", path, e)
