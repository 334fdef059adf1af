"""Derive short alphabetic code prefixes from free-text entity names.

The abbreviation is a pure function of its inputs::

    abbreviate("ABC Corporation Ltd")   -> "ABC"
    abbreviate("The Quick Brown Fox")   -> "QBF"
    abbreviate("", fallback="CUS")      -> "CUS"
"""

import re

from app.constants import DEFAULT_CODE_FALLBACK, DEFAULT_PREFIX_LENGTH

LEGAL_SUFFIXES = (
    "Ltd",
    "Limited",
    "Pvt",
    "Private",
    "Company",
    "Corp",
    "Corporation",
    "Inc",
    "Incorporated",
    "LLC",
    "LLP",
)

FUNCTION_WORDS = ("The", "And", "Of", "For", "In", "On", "At", "By", "With")

_STOP_WORDS_RE = re.compile(
    r"\b(?:" + "|".join(LEGAL_SUFFIXES + FUNCTION_WORDS) + r")\b",
    re.IGNORECASE,
)
_NON_LETTERS_RE = re.compile(r"[^A-Za-z]")


def _words(text: str) -> list[str]:
    """Split on whitespace and keep only the ASCII letters of each token."""
    letters = (_NON_LETTERS_RE.sub("", token) for token in text.split())
    return [word for word in letters if word]


def _from_words(words: list[str], max_length: int) -> str:
    if len(words) == 1:
        return words[0][:max_length].upper()
    return "".join(word[0] for word in words[:max_length]).upper()


def abbreviate(
    name: str | None,
    max_length: int = DEFAULT_PREFIX_LENGTH,
    fallback: str = DEFAULT_CODE_FALLBACK,
) -> str:
    """Return an uppercase prefix of 1..max_length letters for *name*.

    Legal suffixes and function words are ignored. A single remaining word
    is truncated; several words collapse to their initials. When nothing
    meaningful is left the original name is abbreviated instead, and an
    empty name yields *fallback*.

    Raises:
        ValueError: If ``max_length`` is less than 1.
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1")

    if not name or not name.strip():
        return fallback

    words = _words(_STOP_WORDS_RE.sub(" ", name))
    if not words:
        # Name made only of stop words, e.g. "The Company"
        words = _words(name)
    if not words:
        return fallback

    return _from_words(words, max_length)
