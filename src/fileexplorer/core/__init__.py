# Path-safe directory service.
# Created: 2026-10-19

from fileexplorer.core.context import ExplorerContext
from fileexplorer.core.download import prepare_download
from fileexplorer.core.listing import browse
from fileexplorer.core.models import (
    DownloadTarget,
    Entry,
    EntryKind,
    Listing,
    SearchResult,
    UploadReceipt,
)
from fileexplorer.core.paths import resolve_user_path
from fileexplorer.core.result import Err, ErrorKind, Ok, Result
from fileexplorer.core.search import search
from fileexplorer.core.sizes import DirectorySizer, directory_size
from fileexplorer.core.upload import receive_upload

__all__ = [
    "DirectorySizer",
    "DownloadTarget",
    "Entry",
    "EntryKind",
    "Err",
    "ErrorKind",
    "ExplorerContext",
    "Listing",
    "Ok",
    "Result",
    "SearchResult",
    "UploadReceipt",
    "browse",
    "directory_size",
    "prepare_download",
    "receive_upload",
    "resolve_user_path",
    "search",
]
