"""
Host Symbol Table

The symbol space that source units populate. Looking up a name that is not
defined yet fires the missing-symbol handler (the autoload dispatcher) once,
then fails with the host's own SymbolNotFoundError.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..shared.errors import SymbolNotFoundError, SymbolRedefinitionError
from ..utils.config import SYMBOL_SEPARATOR

logger = logging.getLogger(__name__)

MissingSymbolHandler = Callable[[str], Any]


def normalize_symbol(name: str) -> str:
    """Strip a leading separator: '/Vendor/Cls' and 'Vendor/Cls' name the same symbol."""
    return name.lstrip(SYMBOL_SEPARATOR)


class SymbolTable:
    """
    Defined symbols, keyed by fully-qualified name.

    Names are case-sensitive. Values are whatever a source unit defined,
    usually classes.
    """

    def __init__(self):
        self._symbols: Dict[str, Any] = {}
        self._missing_handler: Optional[MissingSymbolHandler] = None

    def define(self, name: str, value: Any) -> None:
        """Define a symbol; redefining it with a different object is an error"""
        key = normalize_symbol(name)
        existing = self._symbols.get(key)
        if existing is not None:
            if existing is value:
                return
            raise SymbolRedefinitionError(key)
        self._symbols[key] = value
        logger.debug(f"SymbolTable: defined {key}")

    def is_defined(self, name: str) -> bool:
        return normalize_symbol(name) in self._symbols

    def get(self, name: str) -> Optional[Any]:
        """Get a defined symbol without triggering autoload"""
        return self._symbols.get(normalize_symbol(name))

    def names(self) -> List[str]:
        return list(self._symbols)

    def set_missing_handler(self, handler: Optional[MissingSymbolHandler]) -> None:
        """Install the callable fired when lookup() misses (None to disable)"""
        self._missing_handler = handler

    def lookup(self, name: str) -> Any:
        """
        Resolve a symbol, autoloading it on first use.

        Raises:
            SymbolNotFoundError: If the symbol is still undefined after the
                missing-symbol handler ran
        """
        key = normalize_symbol(name)
        if key in self._symbols:
            return self._symbols[key]
        if self._missing_handler is not None:
            self._missing_handler(key)
            if key in self._symbols:
                return self._symbols[key]
        raise SymbolNotFoundError(key)

    def __contains__(self, name: str) -> bool:
        return self.is_defined(name)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._symbols)} symbols)"
