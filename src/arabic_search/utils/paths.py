"""Path utilities for locating the document vault."""

from __future__ import annotations

import os
from pathlib import Path

VAULT_ENV = "ARABIC_SEARCH_VAULT"


def find_vault_root(explicit: Path | None = None) -> Path:
    """Vault root: explicit path, then $ARABIC_SEARCH_VAULT, then the current directory."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    env = os.environ.get(VAULT_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()
