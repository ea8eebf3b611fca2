"""
Autoload Service

Automatically loads classes when they are looked up before being defined.
By registering strategies, the host gets a last chance to load a class
before failing with SymbolNotFoundError.

One Autoload instance owns its symbol table, dispatch queue, strategy
registry and loaders. Create it once at startup and pass it to whatever
needs to register strategies or look up symbols.

Example:
    autoload = Autoload()
    autoload.register('app', '/srv/app/src')
    autoload.prepend('vendor', lambda namespace, classname:
                     None if namespace != 'vendor/lib' else f'/srv/vendor/{classname}.py')
    Request = autoload.lookup('App/Http/Request')
"""

import logging
import threading
from typing import Dict, Iterable, Optional

from .dispatcher import SymbolLoadDispatcher
from .path_resolver import Strategy
from .preload import PathForSymbol, PreloadRunner
from .registry import LoaderRegistry, StrategyHook
from ..runtime.queue import DispatchQueue
from ..runtime.source_loader import SourceLoader
from ..runtime.symbols import SymbolTable

logger = logging.getLogger(__name__)


class Autoload:
    """
    Autoload service: registration, on-demand dispatch and preloading.

    Public methods are serialised by one re-entrant lock; loading a unit may
    look up further symbols and so re-enter dispatch on the same thread.
    """

    def __init__(
        self,
        symbols: Optional[SymbolTable] = None,
        queue: Optional[DispatchQueue] = None,
    ):
        """
        Args:
            symbols: Host symbol table (a new one if None)
            queue: Host dispatch queue (a new one with configured capacity if None)
        """
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.queue = queue if queue is not None else DispatchQueue()
        self.source_loader = SourceLoader(self.symbols)
        self.registry = LoaderRegistry(self.queue, self.source_loader)
        self.dispatcher = SymbolLoadDispatcher(self.queue, self.symbols)
        self.preloader = PreloadRunner(self.source_loader)
        self._lock = threading.RLock()
        self.symbols.set_missing_handler(self.load)

    # ---- registration ------------------------------------------------------

    def register(self, alias: str, strategy: Strategy, prepend: bool = False,
                 extension: Optional[str] = None) -> StrategyHook:
        """
        Register a new autoload strategy.

        A root path maps 'Acme/Http/Request' to <root>/Acme/Http/Request.py.
        A callable gets (namespace, classname), namespace lower-cased
        ('acme/http'), and returns a path, or None/False to let the next
        strategy try.

        Raises:
            EmptyAliasError: If alias is empty
            DuplicateAliasError: If alias already exists
            RegistrationError: If the dispatch queue refuses the strategy
        """
        with self._lock:
            return self.registry.register(alias, strategy, prepend, extension)

    def append(self, alias: str, strategy: Strategy) -> StrategyHook:
        """Register a new strategy at the end of the line"""
        return self.register(alias, strategy)

    def prepend(self, alias: str, strategy: Strategy) -> StrategyHook:
        """Register a new strategy at the beginning of the line"""
        return self.register(alias, strategy, True)

    def unregister(self, alias: str) -> bool:
        """
        Unregister a strategy.

        When this empties the dispatch queue the queue is deactivated, and
        strategies that existed before are not reactivated.

        Returns:
            True if the strategy was unregistered, False otherwise
        """
        with self._lock:
            return self.registry.unregister(alias)

    def implementations(self) -> Dict[str, StrategyHook]:
        """All registered strategies, in the order they are tried"""
        with self._lock:
            return self.registry.implementations()

    # ---- loading -----------------------------------------------------------

    def load(self, symbol: str) -> None:
        """Try all registered strategies to load the requested symbol"""
        with self._lock:
            self.dispatcher.dispatch(symbol)

    def include(self, symbols: Iterable[str], path_for_symbol: PathForSymbol) -> None:
        """
        Manually include a list of symbols, in order.

        Useful for units the autoloader itself needs before it can run.

        Raises:
            PreloadFailureError: If any symbol cannot be preloaded
        """
        with self._lock:
            self.preloader.include(symbols, path_for_symbol)

    def lookup(self, symbol: str):
        """
        Get a symbol, autoloading it if needed.

        Raises:
            SymbolNotFoundError: If no strategy defined it
        """
        with self._lock:
            return self.symbols.lookup(symbol)

    def __repr__(self) -> str:
        return f"Autoload(strategies={list(self.registry.implementations())}, {self.symbols!r})"
