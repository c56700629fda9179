"""File tree abstractions that generation reads from and writes into."""

from __future__ import annotations

import posixpath
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping


def normalize_path(path: str) -> str:
    """Return ``path`` as a tree-relative POSIX path."""
    cleaned = posixpath.normpath(path.replace("\\", "/"))
    if cleaned.startswith("/") or re.match(r"^[A-Za-z]:/", cleaned):
        raise ValueError(f"File tree paths must be relative: {path}")
    if cleaned in ("", "."):
        raise ValueError("File tree paths must name a file")
    if cleaned == ".." or cleaned.startswith("../"):
        raise ValueError(f"Path escapes the file tree: {path}")
    return cleaned


class FileTree(ABC):
    """Minimal file store used by the story emitter."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True when a file is present at ``path``."""

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Return the file contents; raise FileNotFoundError when absent."""

    @abstractmethod
    def write(self, path: str, content: bytes) -> None:
        """Create or replace the file at ``path``."""

    @abstractmethod
    def files(self) -> List[str]:
        """Return every file path in the tree, sorted."""


class HostTree(FileTree):
    """File tree backed by a directory on disk."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / normalize_path(path)

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read(self, path: str) -> bytes:
        target = self._resolve(path)
        if not target.is_file():
            raise FileNotFoundError(path)
        return target.read_bytes()

    def write(self, path: str, content: bytes) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    def files(self) -> List[str]:
        if not self.root.exists():
            return []
        return sorted(
            candidate.relative_to(self.root).as_posix()
            for candidate in self.root.rglob("*")
            if candidate.is_file()
        )


class VirtualTree(FileTree):
    """In-memory file tree."""

    def __init__(self, files: Mapping[str, bytes | str] | None = None) -> None:
        self._files: Dict[str, bytes] = {}
        for path, content in (files or {}).items():
            if isinstance(content, str):
                content = content.encode("utf-8")
            self.write(path, content)

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self._files

    def read(self, path: str) -> bytes:
        key = normalize_path(path)
        if key not in self._files:
            raise FileNotFoundError(path)
        return self._files[key]

    def write(self, path: str, content: bytes) -> None:
        self._files[normalize_path(path)] = bytes(content)

    def files(self) -> List[str]:
        return sorted(self._files)


__all__ = ["FileTree", "HostTree", "VirtualTree", "normalize_path"]
