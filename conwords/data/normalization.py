"""Shared helpers for word classification and letter normalization."""

from __future__ import annotations

import re

ACCENTED_LETTERS = {
    "á": "a",
    "é": "e",
    "í": "i",
    "ó": "o",
    "ú": "u",
    "ü": "u",
    "Á": "A",
    "É": "E",
    "Í": "I",
    "Ó": "O",
    "Ú": "U",
    "Ü": "U",
}

# Strings that can be written into the grid: uppercase, digits and the
# Spanish accented capitals. Anything else is only usable as a clue.
WORD_RE = re.compile(r"[A-Z0-9ÁÉÍÓÚÜÑ]+")
WHITESPACE_RE = re.compile(r"\s+")


def is_single_token(text: str) -> bool:
    return WHITESPACE_RE.search(text) is None


def is_placeable(text: str) -> bool:
    """Return True when ``text`` can be used as a grid word."""

    return len(text) > 1 and is_single_token(text) and WORD_RE.fullmatch(text) is not None


def normalize_letter(letter: str) -> str:
    """Strip the accent from a single letter, leaving other characters alone."""

    return ACCENTED_LETTERS.get(letter, letter)


def normalize_word(text: str) -> str:
    return "".join(normalize_letter(char) for char in text)


__all__ = [
    "ACCENTED_LETTERS",
    "WORD_RE",
    "is_placeable",
    "is_single_token",
    "normalize_letter",
    "normalize_word",
]
