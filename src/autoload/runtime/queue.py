"""
Symbol Dispatch Queue

Ordered stack of loader hooks that the host runs when a symbol is missing.
A hook is any callable taking the symbol name and returning True when it
loaded a source unit.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..utils.config import queue_capacity

logger = logging.getLogger(__name__)

LoaderHook = Callable[[str], bool]


class DispatchQueue:
    """
    Host-side hook queue.

    The queue is inactive until the first hook is registered and becomes
    inactive again when the last hook is removed. Registering into an
    inactive queue starts a fresh queue; removed hooks never come back.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Args:
            capacity: Maximum number of hooks (AUTOLOAD_QUEUE_CAPACITY or 64 if None)
        """
        self.capacity = capacity if capacity is not None else queue_capacity()
        self._hooks: List[LoaderHook] = []
        self.active = False

    def register_hook(self, hook: LoaderHook, prepend: bool = False) -> bool:
        """
        Add a hook to the queue.

        Returns:
            True if the hook is queued (including when it already was),
            False if the queue is out of slots

        Raises:
            TypeError: If hook is not callable
        """
        if not callable(hook):
            raise TypeError(f"Dispatch queue hooks must be callable, got {type(hook).__name__}")
        if hook in self._hooks:
            return True
        if len(self._hooks) >= self.capacity:
            logger.debug(f"DispatchQueue: refused hook, all {self.capacity} slots in use")
            return False
        if not self.active:
            self._hooks = []
            self.active = True
            logger.debug("DispatchQueue: activated")
        if prepend:
            self._hooks.insert(0, hook)
        else:
            self._hooks.append(hook)
        return True

    def remove_hook(self, hook: LoaderHook) -> bool:
        """Remove a hook; deactivates the queue when it was the last one"""
        if hook not in self._hooks:
            return False
        self._hooks.remove(hook)
        if not self._hooks:
            self.active = False
            logger.debug("DispatchQueue: deactivated (no hooks left)")
        return True

    def hooks(self) -> Tuple[LoaderHook, ...]:
        return tuple(self._hooks)

    def dispatch(self, symbol: str) -> Optional[LoaderHook]:
        """
        Run hooks in order until one loads a source unit.

        Returns:
            The hook that loaded something, or None
        """
        if not self.active:
            return None
        # Snapshot: hooks may register or unregister while loading
        for hook in tuple(self._hooks):
            if hook(symbol):
                return hook
        return None

    def __len__(self) -> int:
        return len(self._hooks)
