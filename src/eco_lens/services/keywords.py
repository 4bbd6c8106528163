"""Keyword extraction from free text."""

import re

_NON_WORD = re.compile(r"[^a-z0-9 ]+")


def extract_keywords(*texts: str | None) -> list[str]:
    """Return lowercase word tokens in order, duplicates included."""
    joined = " ".join(text or "" for text in texts)
    return _NON_WORD.sub(" ", joined.lower()).split()
