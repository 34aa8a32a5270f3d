"""Document stores: the port the search engine reads from, and two implementations."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Protocol, Sequence, runtime_checkable

import anyio

from arabic_search.core.schema import FileEntry

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


@runtime_checkable
class DocumentStore(Protocol):
    """Read-only view of a host's documents, keyed by path string."""

    def resolve_folder(self, path: str) -> object | None:
        """Return a folder handle for path, or None if it is not a folder."""
        ...

    def list_all_files(self) -> Sequence[FileEntry]:
        ...

    async def read_file_content(self, document_id: str) -> str:
        ...


def _clean(path: str) -> str:
    return path.strip().strip("/")


class FolderStore:
    """Documents on disk under a vault root directory.

    Identifiers are POSIX paths relative to the root, e.g. ``Learning/Arabic/lesson1.md``.
    """

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()
        if not self.root.is_dir():
            raise StoreError(f"Vault root is not a directory: {root}")

    def _resolve(self, path: str) -> Path:
        cleaned = _clean(path)
        try:
            target = (self.root / cleaned).resolve() if cleaned else self.root
        except (OSError, ValueError) as e:
            raise StoreError(f"Invalid path {path!r}: {e}") from e
        if target != self.root and self.root not in target.parents:
            raise StoreError(f"Path escapes the vault: {path}")
        return target

    def resolve_folder(self, path: str) -> Path | None:
        try:
            target = self._resolve(path)
        except StoreError:
            return None
        return target if target.is_dir() else None

    def list_all_files(self) -> list[FileEntry]:
        entries: list[FileEntry] = []
        for path in sorted(self.root.rglob("*")):
            rel = path.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if path.is_file():
                entries.append(FileEntry.from_path(rel.as_posix()))
        logger.debug("Listed %d files under %s", len(entries), self.root)
        return entries

    async def read_file_content(self, document_id: str) -> str:
        target = self._resolve(document_id)
        return await anyio.Path(target).read_text(encoding="utf-8")


class MemoryStore:
    """In-process documents. Folders are implied by file path prefixes."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def _folders(self) -> set[str]:
        folders = {""}
        for path in self.files:
            parents = PurePosixPath(path).parents
            folders.update(str(p) for p in parents if str(p) != ".")
        return folders

    def resolve_folder(self, path: str) -> str | None:
        cleaned = _clean(path)
        return cleaned if cleaned in self._folders() else None

    def list_all_files(self) -> list[FileEntry]:
        return [FileEntry.from_path(path) for path in self.files]

    async def read_file_content(self, document_id: str) -> str:
        try:
            return self.files[document_id]
        except KeyError:
            raise StoreError(f"No such document: {document_id}") from None
