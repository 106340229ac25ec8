# Size aggregator: recursive byte size of a directory tree.
# Created: 2026-10-19

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def directory_size(path: str | Path) -> int:
    """Sum the sizes of all regular files reachable under *path*.

    Walks with an explicit stack so deep trees cannot exhaust the interpreter stack.
    Symlinks are never followed and contribute nothing. Subtrees that cannot be
    read are skipped, so the result may be a partial sum; this never raises.
    """
    total = 0
    pending: list[str] = [os.fspath(path)]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                        elif entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                    except PermissionError:
                        logger.debug("Permission denied: %s", entry.path)
                    except OSError as e:
                        logger.warning("Skipping %s: %s", entry.path, e.strerror or e)
        except PermissionError:
            logger.debug("Permission denied: %s", current)
        except OSError as e:
            logger.warning("Error calculating size for directory %s: %s", current, e.strerror or e)

    return total


class DirectorySizer:
    """Directory size lookups memoized for the lifetime of one request.

    Never share an instance between requests; the filesystem may change in between.
    """

    def __init__(self) -> None:
        self._sizes: dict[str, int] = {}

    def __call__(self, path: str | Path) -> int:
        key = os.fspath(path)
        size = self._sizes.get(key)
        if size is None:
            size = directory_size(key)
            self._sizes[key] = size
        return size
