"""
Symbol Load Dispatcher

Entry point fired when the host meets an undefined symbol: runs the
dispatch queue, then calls the post-load hook of the symbol if it has one.
"""

import inspect
import logging
from abc import ABC, abstractmethod

from .path_resolver import split_symbol
from ..runtime.queue import DispatchQueue
from ..runtime.symbols import SymbolTable, normalize_symbol
from ..shared.errors import InvalidHookError

logger = logging.getLogger(__name__)


class Autoloadable(ABC):
    """
    Capability for classes that want a callback right after autoload.

    Subclasses implement on_autoload() as a staticmethod or classmethod;
    it is called without arguments after the class's unit is loaded.
    """

    @staticmethod
    @abstractmethod
    def on_autoload() -> None:
        ...


class SymbolLoadDispatcher:
    """
    Loads an undefined symbol through the registered strategies.

    Dispatch never raises "not found": when no strategy loads anything the
    symbol simply stays undefined and the host reports it.
    """

    def __init__(self, queue: DispatchQueue, symbols: SymbolTable):
        self.queue = queue
        self.symbols = symbols

    def dispatch(self, symbol: str) -> bool:
        """
        Try every strategy in order until one loads a source unit.

        Returns:
            True if some strategy loaded a unit

        Raises:
            SymbolNameError: If the symbol has fewer than two levels
            InvalidHookError: If the symbol's on_autoload cannot be called statically
        """
        symbol = normalize_symbol(symbol)
        split_symbol(symbol)

        hook = self.queue.dispatch(symbol)
        if hook is None:
            logger.debug(f"No autoloader loaded {symbol}")

        self.invoke_load_hook(symbol)
        return hook is not None

    def invoke_load_hook(self, symbol: str) -> bool:
        """
        Call on_autoload() on the symbol if it is a defined Autoloadable class.

        Returns:
            True if the hook ran
        """
        target = self.symbols.get(symbol)
        if not isinstance(target, type) or not issubclass(target, Autoloadable):
            return False

        hook = inspect.getattr_static(target, "on_autoload")
        if not isinstance(hook, (staticmethod, classmethod)):
            raise InvalidHookError(symbol)

        target.on_autoload()
        logger.debug(f"Invoked on_autoload for {symbol}")
        return True
