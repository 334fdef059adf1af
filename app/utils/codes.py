"""Helpers for parsing generated entity codes."""

import re
from collections.abc import Iterable

_DIGITS_RE = re.compile(r"[0-9]+")


def numeric_suffix(code: str, prefix: str) -> int | None:
    """Return the integer suffix of *code* after *prefix*.

    Codes that do not start with *prefix*, or whose remainder is empty or
    contains anything other than digits, have no numeric suffix.
    """
    if not code.startswith(prefix):
        return None
    remainder = code[len(prefix) :]
    if not _DIGITS_RE.fullmatch(remainder):
        return None
    return int(remainder)


def max_numeric_suffix(codes: Iterable[str], prefix: str) -> int | None:
    """Return the highest numeric suffix among *codes* sharing *prefix*."""
    suffixes = [n for n in (numeric_suffix(code, prefix) for code in codes) if n is not None]
    return max(suffixes, default=None)
