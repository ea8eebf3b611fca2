"""
Preload Runner

Eager, ordered, fail-fast loading of an explicit symbol list. Used at
startup for units that must exist before on-demand loading is set up.
"""

import logging
import os
from typing import Callable, Iterable, Union

from ..runtime.source_loader import SourceLoader
from ..shared.errors import AutoloadError, PreloadFailureError
from ..utils.config import SYMBOL_SEPARATOR

logger = logging.getLogger(__name__)

PathForSymbol = Callable[[str], Union[str, os.PathLike, None, bool]]


class PreloadRunner:
    """Loads symbols one by one; the first failure aborts the rest"""

    def __init__(self, source_loader: SourceLoader):
        self.source_loader = source_loader

    def include(self, symbols: Iterable[str], path_for_symbol: PathForSymbol) -> None:
        """
        Load every listed symbol, in order.

        Later entries may depend on earlier ones, so nothing after a failed
        entry is attempted.

        Args:
            symbols: Symbols to preload
            path_for_symbol: Returns the unit path for a symbol

        Raises:
            PreloadFailureError: On the first symbol whose path cannot be
                computed, does not exist, or fails to load
        """
        for symbol in symbols:
            path = self._path_for(symbol, path_for_symbol)
            if not self.source_loader.is_regular_file(path):
                raise PreloadFailureError(symbol, f"No source unit at {path}.")
            try:
                self.source_loader.load(path, self._namespace(symbol))
            except AutoloadError as e:
                raise PreloadFailureError(symbol, str(e)) from e
            logger.debug(f"Preloaded {symbol} from {path}")

    def _path_for(self, symbol: str, path_for_symbol: PathForSymbol) -> Union[str, os.PathLike]:
        try:
            path = path_for_symbol(symbol)
        except Exception as e:
            raise PreloadFailureError(symbol, f"{type(e).__name__}: {e}") from e
        if path is None or path is False or path == "":
            raise PreloadFailureError(symbol, "No path could be resolved.")
        if not isinstance(path, (str, os.PathLike)):
            raise PreloadFailureError(symbol, f"Path callback returned {type(path).__name__}.")
        return path

    @staticmethod
    def _namespace(symbol: str) -> str:
        # Single-level names still load; their classes land at top level
        return symbol.lstrip(SYMBOL_SEPARATOR).rpartition(SYMBOL_SEPARATOR)[0]
