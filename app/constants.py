"""Shared constants used across the application."""

# Entity code format: uppercase letters/digits, optionally joined by hyphens
# (e.g. TES001, VEND012, TES001-WAR001)
ENTITY_CODE_PATTERN = r"^[A-Z0-9]+(?:-[A-Z0-9]+)*$"
ENTITY_CODE_MAX_LENGTH = 30

DEFAULT_PREFIX_LENGTH = 3
DEFAULT_PAD_WIDTH = 3
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_CODE_FALLBACK = "UNK"

# Project codes nest a customer code: <customer code>-<letters><digits>
# (30 + 1 + up to 10 letters + up to 10 padded digits, with headroom)
PROJECT_CODE_MAX_LENGTH = 64
