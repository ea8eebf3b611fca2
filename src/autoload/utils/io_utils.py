"""
Centralized file I/O utilities.

- Single place for regular-file checks on candidate unit paths
"""

import os
from pathlib import Path
from typing import Union


def is_regular_file(path: Union[Path, str, os.PathLike]) -> bool:
    """True if path names an existing regular file (directories and empty paths are not)."""
    if not path:
        return False
    return Path(path).is_file()
