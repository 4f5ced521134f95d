"""
Configuration for arg-input.
"""

import io
from typing import Final

# --- Argument Handling ---
STDIN_SENTINEL: Final[str] = "-"

# --- Stream Configuration ---
DEFAULT_BUFFER_SIZE: Final[int] = io.DEFAULT_BUFFER_SIZE
LINE_TERMINATOR: Final[bytes] = b"\n"
CARRIAGE_RETURN: Final[bytes] = b"\r"

# --- Text Decoding ---
DEFAULT_ENCODING: Final[str] = "utf-8"
DEFAULT_ERRORS: Final[str] = "strict"

# --- CLI Configuration ---
CLI_NAME: Final[str] = "argcat"
VERSION: Final[str] = "0.1.0"

# --- SSoT Enforcement ---
__all__ = [
    "CARRIAGE_RETURN",
    "CLI_NAME",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_ENCODING",
    "DEFAULT_ERRORS",
    "LINE_TERMINATOR",
    "STDIN_SENTINEL",
    "VERSION",
]
