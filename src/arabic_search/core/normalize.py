"""Diacritic stripping for Arabic text comparison."""

from __future__ import annotations

import re
import unicodedata

# Arabic tashkeel: fathatan .. sukun
DIACRITIC_FIRST = "\u064b"
DIACRITIC_LAST = "\u0652"

_DIACRITICS_RE = re.compile(f"[{DIACRITIC_FIRST}-{DIACRITIC_LAST}]")


def is_diacritic(char: str) -> bool:
    return DIACRITIC_FIRST <= char <= DIACRITIC_LAST


def normalize(text: str) -> str:
    """Return the comparison form of text: NFD with Arabic tashkeel removed.

    Only used for matching; never display the result.
    """
    return _DIACRITICS_RE.sub("", unicodedata.normalize("NFD", text))


def find_span(text: str, normalized_query: str) -> tuple[int, int] | None:
    """Locate normalized_query inside text, in original character offsets.

    Each original code point is decomposed on its own so every character of
    the comparison form can be traced back to the code point it came from.
    The span is half-open and swallows diacritics trailing the last matched
    letter. Returns None when the query cannot be located this way (e.g.
    when canonical reordering across characters changes the comparison form).
    """
    if not normalized_query:
        return (0, 0)

    chars: list[str] = []
    origins: list[int] = []
    for index, char in enumerate(text):
        for piece in unicodedata.normalize("NFD", char):
            if is_diacritic(piece):
                continue
            chars.append(piece)
            origins.append(index)

    pos = "".join(chars).find(normalized_query)
    if pos == -1:
        return None

    start = origins[pos]
    end = origins[pos + len(normalized_query) - 1] + 1
    while end < len(text) and is_diacritic(text[end]):
        end += 1
    return (start, end)
