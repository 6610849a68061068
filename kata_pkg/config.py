"""Centralized configuration for Kata.

This module defines:
- Input validation limits (text length, expansion count)
- OCR account geometry
- Text wrapping defaults and the long-word policy
- Default logging level for the CLI

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with KATA_)
"""

import os

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("kata")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("KATA_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPANSIONS = int(
    os.getenv("KATA_MAX_EXPANSIONS", "100000")
)  # distinct brace-expansion results

# OCR bank accounts
ACCOUNT_LENGTH = int(os.getenv("KATA_ACCOUNT_LENGTH", "9"))  # digits per account
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3

# Text wrapping
WRAP_COLUMNS = int(os.getenv("KATA_WRAP_COLUMNS", "80"))
WRAP_LONG_WORDS = os.getenv("KATA_WRAP_LONG_WORDS", "error").lower()  # "error", "break"
WRAP_LONG_WORD_POLICIES = ("error", "break")

# Logging
LOG_LEVEL = os.getenv("KATA_LOG_LEVEL", "WARNING").upper()
