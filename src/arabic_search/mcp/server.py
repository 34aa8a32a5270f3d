"""MCP server exposing diacritic-insensitive search as tools and resources."""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP

from arabic_search.core.normalize import normalize
from arabic_search.core.search import search_with_settings
from arabic_search.core.store import DocumentStore, FolderStore
from arabic_search.utils.config import load_settings
from arabic_search.utils.paths import find_vault_root

logger = logging.getLogger(__name__)

_INSTRUCTIONS = (
    "Arabic search finds lines in the user's notes that contain a term, ignoring Arabic "
    "diacritics (tashkeel). Each result carries the document path and 1-based line number "
    "so the caller can jump to it, plus the preceding line for context."
)

mcp = FastMCP("arabic-search", instructions=_INSTRUCTIONS)

_store: DocumentStore | None = None


def _get_store() -> DocumentStore:
    """Return the module-level store, opening the vault root if needed."""
    global _store
    if _store is None:
        _store = FolderStore(find_vault_root())
    return _store


def set_store(store: DocumentStore | None) -> None:
    """Override the module-level store (used in tests)."""
    global _store
    _store = store


# ---------------------------------------------------------------------------
# Resources (read-only)
# ---------------------------------------------------------------------------


@mcp.resource("search://settings")
def resource_settings() -> str:
    """Current search settings (folder, extensions, boundary mode)."""
    return load_settings().model_dump_json(indent=2)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def arabic_search(query: str, folder_path: str | None = None) -> str:
    """Search notes for a term, ignoring Arabic diacritics.

    Args:
        query: Arabic or English term. Diacritics in the query and the notes are ignored.
        folder_path: Folder to search, relative to the vault. Omit it to use the
            configured folder; pass "" to search the whole vault.

    Returns a JSON list of matches with document_id, line_number, matched_line_text,
    context_line_text (previous line) and the match span inside the matched line.
    """
    settings = load_settings()
    if folder_path is not None:
        settings.folder_path = folder_path
    results = await search_with_settings(_get_store(), query, settings)
    logger.debug("arabic_search %r -> %d matches", query, len(results))
    return json.dumps([r.model_dump() for r in results], indent=2, ensure_ascii=False)


@mcp.tool()
def arabic_normalize(text: str) -> str:
    """Return the diacritic-free form of text used for matching."""
    return normalize(text)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """Run the MCP server on stdio."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
