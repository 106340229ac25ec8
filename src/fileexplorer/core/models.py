# Value types produced by the directory service.
# Created: 2026-10-19

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """One filesystem child.

    ``rel_path`` is relative to the root, uses the native separator and never starts
    with one. For directories ``size`` is the recursive aggregate.
    """

    name: str
    kind: EntryKind
    size: int
    rel_path: str


@dataclass
class Listing:
    """Result of browsing one directory."""

    path: str
    entries: list[Entry] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return sum(1 for e in self.entries if e.kind is EntryKind.FILE)

    @property
    def folder_count(self) -> int:
        return sum(1 for e in self.entries if e.kind is EntryKind.DIRECTORY)

    @property
    def total_size(self) -> int:
        return sum(e.size for e in self.entries)


@dataclass
class SearchResult:
    path: str
    query: str
    matches: list[Entry] = field(default_factory=list)


@dataclass(frozen=True)
class UploadReceipt:
    file_name: str
    size: int
    rel_path: str


@dataclass(frozen=True)
class DownloadTarget:
    path: Path
    file_name: str
    size: int
