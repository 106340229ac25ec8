# Explorer context: the canonical root every operation is confined to.
# Created: 2026-10-19

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def canonical_root(path: str | Path) -> Path:
    """Return the canonical absolute form of *path*.

    Raises ``FileNotFoundError`` if the directory does not exist and
    ``NotADirectoryError`` if it names something else.
    """
    root = Path(path).expanduser().resolve(strict=True)
    if not root.is_dir():
        raise NotADirectoryError(f"Home directory is not a directory: {root}")
    return root


@dataclass(frozen=True)
class ExplorerContext:
    """Immutable per-process state handed to every core operation."""

    root: Path

    @classmethod
    def from_directory(cls, path: str | Path) -> ExplorerContext:
        return cls(root=canonical_root(path))
