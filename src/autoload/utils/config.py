"""
Configuration constants for symbol resolution and source loading
"""

import os

from typing_extensions import Final

# Symbol naming constants
SYMBOL_SEPARATOR: Final = "/"
SUFFIX_DELIMITER: Final = "_"
MIN_SYMBOL_LEVELS: Final = 2

# Source unit constants
SOURCE_FILE_EXTENSION: Final = ".py"
UNIT_MODULE_PREFIX: Final = "autoload_unit_"
NAMESPACE_ATTRIBUTE: Final = "__namespace__"
SYMBOLS_ATTRIBUTE: Final = "__symbols__"

# Dispatch queue constants
DEFAULT_QUEUE_CAPACITY: Final = 64
MAX_LOAD_DEPTH: Final = 32  # Nested unit loads before we assume runaway recursion

# Environment overrides
QUEUE_CAPACITY_ENV: Final = "AUTOLOAD_QUEUE_CAPACITY"
SOURCE_EXTENSION_ENV: Final = "AUTOLOAD_SOURCE_EXTENSION"


def queue_capacity() -> int:
    """Dispatch queue slot count, overridable through AUTOLOAD_QUEUE_CAPACITY."""
    raw = os.environ.get(QUEUE_CAPACITY_ENV, "").strip()
    if not raw:
        return DEFAULT_QUEUE_CAPACITY
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{QUEUE_CAPACITY_ENV} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{QUEUE_CAPACITY_ENV} must be positive, got {value}")
    return value


def source_extension() -> str:
    """Source unit extension, overridable through AUTOLOAD_SOURCE_EXTENSION."""
    ext = os.environ.get(SOURCE_EXTENSION_ENV, "").strip() or SOURCE_FILE_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"
