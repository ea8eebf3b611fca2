"""
Loader Registry

Ordered collection of named autoload strategies. Every alias in the
registry has exactly one live hook in the host dispatch queue; the two are
added and removed together.
"""

import logging
from collections import OrderedDict
from typing import Dict, Optional

from .path_resolver import PathResolver, Strategy, namespace_of
from ..runtime.queue import DispatchQueue
from ..runtime.source_loader import SourceLoader
from ..shared.errors import DuplicateAliasError, EmptyAliasError, RegistrationError

logger = logging.getLogger(__name__)


class StrategyHook:
    """
    Queue hook for one registered strategy.

    Called with a symbol name; returns True only when it loaded a source
    unit. A declining callable or a path that is not a regular file both
    return False so the queue moves on to the next strategy.
    """

    def __init__(self, alias: str, resolver: PathResolver, source_loader: SourceLoader):
        self.alias = alias
        self.resolver = resolver
        self.source_loader = source_loader

    def __call__(self, symbol: str) -> bool:
        resolution = self.resolver.resolve(symbol)
        if resolution.is_declined():
            logger.debug(f"Autoloader '{self.alias}' declined {symbol}")
            return False

        path = resolution.unwrap()
        if not self.source_loader.is_regular_file(path):
            logger.debug(f"Autoloader '{self.alias}': no file at {path} for {symbol}")
            return False

        self.source_loader.load(path, namespace_of(symbol))
        logger.debug(f"Autoloader '{self.alias}' loaded {symbol} from {path}")
        return True

    def __repr__(self) -> str:
        return f"StrategyHook(alias={self.alias!r}, resolver={self.resolver!r})"


class LoaderRegistry:
    """
    Alias -> hook map kept in dispatch order.

    Strategies are tried in registration order; a prepended strategy goes
    in front of every existing one.
    """

    def __init__(self, queue: DispatchQueue, source_loader: SourceLoader):
        self.queue = queue
        self.source_loader = source_loader
        self._hooks: "OrderedDict[str, StrategyHook]" = OrderedDict()

    def register(self, alias: str, strategy: Strategy, prepend: bool = False,
                 extension: Optional[str] = None) -> StrategyHook:
        """
        Register a new autoload strategy.

        Args:
            alias: Strategy name, used later to unregister it
            strategy: Root directory, or callable (namespace, classname) -> path | None | False
            prepend: Put the strategy in front of the queue instead of the end
            extension: Source extension for a root-directory strategy

        Raises:
            EmptyAliasError: If alias is empty
            DuplicateAliasError: If alias is already registered
            RegistrationError: If the dispatch queue refuses the hook
        """
        if not alias:
            raise EmptyAliasError()
        if alias in self._hooks:
            raise DuplicateAliasError(alias)

        hook = StrategyHook(alias, PathResolver(strategy, extension), self.source_loader)
        self._hooks[alias] = hook
        if prepend:
            self._hooks.move_to_end(alias, last=False)

        if not self.queue.register_hook(hook, prepend):
            del self._hooks[alias]
            raise RegistrationError(alias, f"Dispatch queue is full ({self.queue.capacity} slots).")

        logger.debug(f"Registered autoloader '{alias}' ({'prepend' if prepend else 'append'}): {hook.resolver!r}")
        return hook

    def append(self, alias: str, strategy: Strategy) -> StrategyHook:
        """Register a strategy at the end of the line"""
        return self.register(alias, strategy)

    def prepend(self, alias: str, strategy: Strategy) -> StrategyHook:
        """Register a strategy at the beginning of the line"""
        return self.register(alias, strategy, True)

    def unregister(self, alias: str) -> bool:
        """
        Unregister a strategy.

        If this empties the dispatch queue, the queue is deactivated; hooks
        removed earlier are not brought back.

        Returns:
            True if the strategy was removed, False if the alias is unknown
            or the queue did not hold its hook
        """
        hook = self._hooks.get(alias)
        if hook is None:
            logger.warning(f"Cannot unregister autoloader '{alias}': not registered")
            return False
        if not self.queue.remove_hook(hook):
            return False
        del self._hooks[alias]
        logger.debug(f"Unregistered autoloader '{alias}'")
        return True

    def implementations(self) -> Dict[str, StrategyHook]:
        """Snapshot of registered strategies in dispatch order"""
        return OrderedDict(self._hooks)

    def __contains__(self, alias: str) -> bool:
        return alias in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)
