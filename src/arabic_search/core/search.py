"""Diacritic-insensitive full-text search across a folder of documents."""

from __future__ import annotations

import logging
from typing import Iterable

from arabic_search.core.normalize import find_span, normalize
from arabic_search.core.schema import MatchRecord, SearchSettings
from arabic_search.core.store import DocumentStore

logger = logging.getLogger(__name__)


def validate_folder(store: DocumentStore, folder_path: str) -> bool:
    """True if folder_path names an existing folder in the store."""
    return store.resolve_folder(folder_path) is not None


def match_lines(document_id: str, content: str, normalized_query: str) -> list[MatchRecord]:
    """Return a record for every line of content containing the query."""
    lines = content.split("\n")
    records: list[MatchRecord] = []
    for i, line in enumerate(lines):
        if normalized_query not in normalize(line):
            continue
        span = find_span(line, normalized_query)
        records.append(
            MatchRecord(
                document_id=document_id,
                line_number=i + 1,
                matched_line_text=line,
                context_line_text=lines[i - 1] if i > 0 else "",
                match_start=span[0] if span else None,
                match_end=span[1] if span else None,
            )
        )
    return records


class SearchEngine:
    """Scans candidate documents from scratch on every call. No caching."""

    def __init__(
        self,
        store: DocumentStore,
        extensions: Iterable[str] = ("md",),
        strict_folder_boundary: bool = False,
    ) -> None:
        self.store = store
        self.extensions = frozenset(extensions)
        self.strict_folder_boundary = strict_folder_boundary

    @classmethod
    def from_settings(cls, store: DocumentStore, settings: SearchSettings) -> SearchEngine:
        return cls(
            store,
            extensions=settings.extensions,
            strict_folder_boundary=settings.strict_folder_boundary,
        )

    def _in_scope(self, path: str, folder_path: str) -> bool:
        if not self.strict_folder_boundary:
            # Plain prefix: "Arabic" also matches "ArabicOld/notes.md"
            return path.startswith(folder_path)
        folder = folder_path.strip().strip("/")
        if not folder:
            return True
        return path == folder or path.startswith(folder + "/")

    def list_candidates(self, folder_path: str) -> list[str]:
        """Searchable documents under folder_path, in store order.

        An unknown folder yields no candidates rather than an error.
        """
        if not validate_folder(self.store, folder_path):
            logger.debug("Folder %r does not resolve; no candidates", folder_path)
            return []
        return [
            entry.path
            for entry in self.store.list_all_files()
            if self._in_scope(entry.path, folder_path) and entry.extension in self.extensions
        ]

    async def search(self, query: str, folder_path: str) -> list[MatchRecord]:
        """Find every line under folder_path containing query, ignoring tashkeel.

        Documents are read one at a time. A document that fails to read
        contributes nothing and the scan moves on.
        """
        normalized_query = normalize(query.strip())
        candidates = self.list_candidates(folder_path)
        if not candidates:
            return []

        results: list[MatchRecord] = []
        for path in candidates:
            try:
                content = await self.store.read_file_content(path)
            except Exception as e:
                logger.warning("Skipping %s: %s", path, e)
                continue

            if normalized_query not in normalize(content):
                continue
            results.extend(match_lines(path, content, normalized_query))

        logger.debug(
            "Search %r in %r: %d candidates, %d matches",
            query, folder_path, len(candidates), len(results),
        )
        return results


async def search_with_settings(
    store: DocumentStore, query: str, settings: SearchSettings
) -> list[MatchRecord]:
    """Search settings.folder_path using the extensions and boundary mode in settings."""
    engine = SearchEngine.from_settings(store, settings)
    return await engine.search(query, settings.folder_path)
