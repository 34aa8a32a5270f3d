"""Global settings: JSON file under the user's config directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from arabic_search.core.schema import SearchSettings

logger = logging.getLogger(__name__)

SETTING_KEYS = tuple(SearchSettings.model_fields)


def global_config_dir() -> Path:
    config = Path.home() / ".config" / "arabic-search"
    config.mkdir(parents=True, exist_ok=True)
    return config


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if path.exists():
        return json.loads(path.read_text())
    return {}


def save_global_config(config: dict) -> None:
    path = global_config_dir() / "config.json"
    path.write_text(json.dumps(config, indent=2))


def load_settings() -> SearchSettings:
    """Stored values override the defaults key by key; unknown keys are ignored."""
    data = load_global_config()
    stored = {k: v for k, v in data.items() if k in SETTING_KEYS}
    try:
        return SearchSettings(**stored)
    except ValidationError as e:
        logger.warning("Ignoring invalid stored settings: %s", e)
        return SearchSettings()
