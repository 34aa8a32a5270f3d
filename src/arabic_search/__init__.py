"""Diacritic-insensitive search across a folder of Arabic notes."""

from arabic_search.core.normalize import normalize
from arabic_search.core.schema import MatchRecord
from arabic_search.core.search import SearchEngine

__version__ = "0.1.0"

__all__ = ["MatchRecord", "SearchEngine", "normalize", "__version__"]
