"""
Autoload utilities package
"""

from .io_utils import is_regular_file

__all__ = ["is_regular_file"]
