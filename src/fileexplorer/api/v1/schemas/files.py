# File explorer schemas.
# Created: 2026-10-19
#
# Field names are part of the browser wire contract, hence the mixed casing.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class FileEntry(BaseModel):
    """A single file or directory entry."""

    Name: str
    Type: Literal["file", "directory"]
    Size: int
    Path: str


class BrowseResponse(BaseModel):
    """Directory listing with aggregates."""

    path: str
    fileCount: int = 0
    folderCount: int = 0
    totalSize: int = 0
    contents: list[FileEntry] = []


class SearchResponse(BaseModel):
    """Recursive name search results."""

    path: str
    query: str
    matches: list[FileEntry] = []


class UploadResponse(BaseModel):
    message: str = "File uploaded successfully."
    fileName: str
