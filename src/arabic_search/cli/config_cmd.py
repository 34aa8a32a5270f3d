"""Config subcommands: get, set, list for search settings."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from arabic_search.cli._shared import FORMAT_OPTION
from arabic_search.core.schema import SearchSettings
from arabic_search.utils.config import SETTING_KEYS, load_global_config, save_global_config
from arabic_search.utils.output import error, info, output, success

config_app = typer.Typer(no_args_is_help=True)

_BOOL_VALUES = {"true": True, "yes": True, "1": True, "false": False, "no": False, "0": False}


def _check_key(key: str) -> None:
    if key not in SETTING_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(SETTING_KEYS))}")
        raise typer.Exit(1)


def _parse_value(key: str, value: str):
    if key == "strict_folder_boundary":
        parsed = _BOOL_VALUES.get(value.strip().lower())
        if parsed is None:
            raise ValueError(f"expected true or false, got '{value}'")
        return parsed
    if key == "extensions":
        # Let the model split and clean the list
        return SearchSettings(extensions=value).extensions
    return value


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value (stored or default)."""
    _check_key(key)

    config = load_global_config()
    stored = key in config
    value = config[key] if stored else getattr(SearchSettings(), key)
    if fmt == "json":
        output({"key": key, "value": value, "default": not stored}, fmt="json")
    else:
        suffix = "" if stored else " (default)"
        info(f"{key}: {value}{suffix}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value."""
    _check_key(key)

    try:
        parsed = _parse_value(key, value)
        SearchSettings(**{key: parsed})
    except (ValueError, ValidationError) as e:
        error(f"Invalid value for {key}: {e}")
        raise typer.Exit(1)

    config = load_global_config()
    config[key] = parsed
    save_global_config(config)

    if fmt == "json":
        output({"key": key, "value": parsed}, fmt="json")
    else:
        success(f"{key} = {parsed}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Remove a stored value so the default applies again."""
    _check_key(key)

    config = load_global_config()
    if config.pop(key, None) is None:
        info(f"{key}: (not set)")
        return
    save_global_config(config)
    success(f"{key} reset to default")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List all configuration values."""
    config = load_global_config()
    if fmt == "json":
        output(config, fmt="json")
    elif config:
        for k, v in sorted(config.items()):
            info(f"{k}: {v}")
    else:
        info("No configuration set")
