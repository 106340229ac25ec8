# File explorer router: browse, search, upload, download.
# Created: 2026-10-19
#
# Each handler resolves its input through one core operation run in a worker thread
# and serializes the result. Core errors are mapped in fileexplorer.api.errors.

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import FileResponse

from fileexplorer.api.deps import get_app_settings, get_context
from fileexplorer.api.errors import UPLOAD_TOO_LARGE, error_json, error_response
from fileexplorer.api.v1.schemas.common import ErrorResponse
from fileexplorer.api.v1.schemas.files import (
    BrowseResponse,
    FileEntry,
    SearchResponse,
    UploadResponse,
)
from fileexplorer.config import Settings
from fileexplorer.core import (
    Entry,
    Err,
    ExplorerContext,
    browse,
    prepare_download,
    receive_upload,
    search,
)
from fileexplorer.core.result import bad_request
from fileexplorer.core.upload import EMPTY_UPLOAD

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])

_ERRORS = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _to_file_entry(entry: Entry) -> FileEntry:
    return FileEntry(Name=entry.name, Type=entry.kind.value, Size=entry.size, Path=entry.rel_path)


@router.get("/browse", response_model=BrowseResponse, responses=_ERRORS)
async def browse_files(
    path: str | None = Query(None, description="Directory relative to the home directory"),
    ctx: ExplorerContext = Depends(get_context),
):
    """List a directory with per-entry sizes and totals. Defaults to the home directory."""
    result = await asyncio.to_thread(browse, ctx, path or "")
    if isinstance(result, Err):
        return error_response(result)

    listing = result.value
    return BrowseResponse(
        path=listing.path,
        fileCount=listing.file_count,
        folderCount=listing.folder_count,
        totalSize=listing.total_size,
        contents=[_to_file_entry(e) for e in listing.entries],
    )


@router.get("/search", response_model=SearchResponse, responses=_ERRORS)
async def search_files(
    query: str | None = Query(None, description="Substring to look for in names"),
    path: str | None = Query(None, description="Directory to search under"),
    ctx: ExplorerContext = Depends(get_context),
):
    """Recursively find files and directories whose name contains ``query``."""
    logger.debug("Search endpoint hit: query=%r, path=%r", query, path)
    result = await asyncio.to_thread(search, ctx, query, path or "")
    if isinstance(result, Err):
        return error_response(result)

    found = result.value
    return SearchResponse(
        path=found.path,
        query=found.query,
        matches=[_to_file_entry(e) for e in found.matches],
    )


@router.get(
    "/download",
    response_class=FileResponse,
    responses={**_ERRORS, 200: {"content": {"application/octet-stream": {}}}},
)
async def download_file(
    file_path: str | None = Query(None, alias="filePath"),
    ctx: ExplorerContext = Depends(get_context),
    settings: Settings = Depends(get_app_settings),
):
    """Stream a file as an attachment."""
    result = await asyncio.to_thread(prepare_download, ctx, file_path)
    if isinstance(result, Err):
        return error_response(result)

    target = result.value
    response = FileResponse(
        target.path,
        media_type="application/octet-stream",
        filename=target.file_name,
        content_disposition_type="attachment",
    )
    response.chunk_size = settings.copy_chunk_size
    return response


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={**_ERRORS, 413: {"model": ErrorResponse}},
)
async def upload_file(
    file: UploadFile | None = File(None),
    path: str | None = Form(None),
    ctx: ExplorerContext = Depends(get_context),
    settings: Settings = Depends(get_app_settings),
):
    """Save an uploaded file into ``path``, overwriting any file with the same name."""
    logger.debug("Path received on upload: %r", path)
    if file is None:
        return error_response(bad_request(EMPTY_UPLOAD))

    try:
        limit = settings.max_upload_bytes
        if limit is not None and file.size is not None and file.size > limit:
            return error_json(413, UPLOAD_TOO_LARGE)

        result = await asyncio.to_thread(
            receive_upload,
            ctx,
            path or "",
            file.filename,
            file.file,
            chunk_size=settings.copy_chunk_size,
        )
    finally:
        await file.close()

    if isinstance(result, Err):
        return error_response(result)
    return UploadResponse(fileName=result.value.file_name)
