# Download streamer: validate a file under the root for attachment streaming.
# Created: 2026-10-19
#
# The byte stream itself is produced by the HTTP layer (Starlette FileResponse),
# which owns the file handle and closes it on completion or client disconnect.

from __future__ import annotations

import logging
import os

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.models import DownloadTarget
from fileexplorer.core.paths import resolve_user_path
from fileexplorer.core.result import Err, Ok, Result, bad_request, internal, not_found

logger = logging.getLogger(__name__)

FILE_PATH_REQUIRED = "filePath parameter is required."
FILE_NOT_FOUND = "File not found."


def prepare_download(ctx: ExplorerContext, rel_path: str | None) -> Result[DownloadTarget]:
    if not rel_path:
        return bad_request(FILE_PATH_REQUIRED)

    resolved = resolve_user_path(ctx, rel_path)
    if isinstance(resolved, Err):
        return resolved
    path = resolved.value

    if not path.is_file():
        return not_found(FILE_NOT_FOUND)

    if not os.access(path, os.R_OK):
        logger.info("Download refused, file not readable: %s", path)
        return internal("Permission denied.")

    try:
        size = path.stat().st_size
    except OSError as e:
        logger.error("Error serving file %s: %s", path, e)
        return internal(e.strerror or "Could not read file.")

    return Ok(DownloadTarget(path=path, file_name=path.name, size=size))
