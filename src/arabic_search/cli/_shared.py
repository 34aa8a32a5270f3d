"""Shared CLI utilities to avoid circular imports."""

from __future__ import annotations

from pathlib import Path

import typer

from arabic_search.core.store import FolderStore, StoreError
from arabic_search.utils.output import error
from arabic_search.utils.paths import find_vault_root

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")
VAULT_OPTION = typer.Option(
    None, "--vault", "-V", help="Vault root directory (default: $ARABIC_SEARCH_VAULT or cwd)"
)


def get_store(vault: Path | None = None) -> FolderStore:
    """Resolve the vault root and return a FolderStore."""
    root = find_vault_root(vault)
    try:
        return FolderStore(root)
    except StoreError as e:
        error(str(e))
        raise typer.Exit(1)
