"""Shared fixtures: temp vaults on disk and in-memory stores."""

from __future__ import annotations

from pathlib import Path

import pytest

from arabic_search.core.store import FolderStore, MemoryStore

LESSON_1 = "مَرْحَبًا\nكيف حالك"
LESSON_2 = "# الدرس الثاني\nالكِتَابُ عَلَى الطَّاوِلَةِ\nقرأتُ كتابًا جديدًا"


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """A vault directory laid out like a notes app."""
    arabic = tmp_path / "Learning" / "Arabic"
    (arabic / "grammar").mkdir(parents=True)
    (arabic / "lesson1.md").write_text(LESSON_1, encoding="utf-8")
    (arabic / "grammar" / "lesson2.md").write_text(LESSON_2, encoding="utf-8")
    (arabic / "vocab.txt").write_text("مرحبا", encoding="utf-8")

    other = tmp_path / "Learning" / "ArabicOld"
    other.mkdir()
    (other / "notes.md").write_text("مرحبا قديم", encoding="utf-8")

    hidden = tmp_path / ".obsidian"
    hidden.mkdir()
    (hidden / "workspace.md").write_text("مرحبا", encoding="utf-8")
    return tmp_path


@pytest.fixture
def folder_store(vault: Path) -> FolderStore:
    return FolderStore(vault)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore(
        {
            "Learning/Arabic/lesson1.md": LESSON_1,
            "Learning/Arabic/grammar/lesson2.md": LESSON_2,
            "Learning/ArabicOld/notes.md": "مرحبا قديم",
            "Journal/today.md": "مرحبا من اليوميات",
        }
    )


@pytest.fixture
def clean_config(monkeypatch, tmp_path_factory):
    """Redirect the global config dir to a temp directory."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setattr("arabic_search.utils.config.global_config_dir", lambda: config_dir)
    return config_dir
