"""Typer app: search, validate, normalize and the config command group."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Optional

import anyio
import typer
from rich.markup import escape

from arabic_search.cli._shared import FORMAT_OPTION, VAULT_OPTION, get_store
from arabic_search.core.normalize import normalize as normalize_text
from arabic_search.core.search import search_with_settings, validate_folder
from arabic_search.utils.config import load_settings
from arabic_search.utils.output import error, info, output, output_matches, success

app = typer.Typer(
    name="arabic-search",
    help="Arabic search: diacritic-insensitive search across a folder of notes.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        from rich.logging import RichHandler

        from arabic_search.utils.output import error_console

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=error_console, show_path=False)],
        )


@app.command()
def search(
    query: str = typer.Argument(..., help="Term to search for (diacritics are ignored)"),
    folder: Optional[str] = typer.Option(None, "--folder", "-f", help="Folder to search (default: configured folder_path)"),
    vault: Optional[Path] = VAULT_OPTION,
    strict: Optional[bool] = typer.Option(
        None, "--strict/--prefix", help="Match the folder on path boundaries instead of a plain prefix"
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N matches"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Search the configured folder for QUERY, ignoring Arabic diacritics."""
    store = get_store(vault)
    settings = load_settings()
    if folder is not None:
        settings.folder_path = folder
    if strict is not None:
        settings.strict_folder_boundary = strict

    results = anyio.run(partial(search_with_settings, store, query, settings))
    if limit is not None:
        results = results[:limit]
    output_matches(results, fmt=fmt)


@app.command()
def validate(
    folder: Optional[str] = typer.Argument(None, help="Folder to check (default: configured folder_path)"),
    vault: Optional[Path] = VAULT_OPTION,
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Check that a folder exists in the vault."""
    store = get_store(vault)
    folder_path = folder if folder is not None else load_settings().folder_path
    valid = validate_folder(store, folder_path)

    if fmt == "json":
        output({"folder_path": folder_path, "valid": valid}, fmt="json")
    elif valid:
        success(f"'{folder_path}' is a folder in {store.root}")
    else:
        error(f"'{folder_path}' is not a folder in {store.root}")
    if not valid:
        raise typer.Exit(1)


@app.command()
def normalize(
    text: str = typer.Argument(..., help="Text to normalize"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Show the diacritic-free form used for matching."""
    result = normalize_text(text)
    if fmt == "json":
        output({"text": text, "normalized": result}, fmt="json")
    else:
        info(escape(result))


# Register subcommand groups
from arabic_search.cli.config_cmd import config_app

app.add_typer(config_app, name="config", help="Manage search settings")
