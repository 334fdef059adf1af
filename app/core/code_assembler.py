"""Assemble final entity codes from a prefix and a sequence number."""

from app.constants import DEFAULT_PAD_WIDTH


def assemble_code(prefix: str, next_number: int, pad_width: int = DEFAULT_PAD_WIDTH) -> str:
    """Join *prefix* and the zero-padded *next_number*.

    Numbers wider than *pad_width* keep all their digits (``ABC1000``).
    """
    if next_number < 1:
        raise ValueError("next_number must be at least 1")
    if pad_width < 1:
        raise ValueError("pad_width must be at least 1")
    return f"{prefix}{next_number:0{pad_width}d}"
