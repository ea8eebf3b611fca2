"""
Source Loader

Executes source units from the filesystem and defines the classes they
declare in the host symbol table.

This class handles:
- Regular-file checks for candidate paths
- Executing a unit as a fresh module
- Defining the unit's public classes under its namespace
- Per-path caching and circular load detection
"""

import hashlib
import importlib.machinery
import importlib.util
import logging
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Dict, List, Optional, Union

from .symbols import SymbolTable
from .unit_info import LoadedUnit
from ..shared.errors import (
    AutoloadError,
    CircularLoadError,
    SourceLoadError,
    SymbolRedefinitionError,
)
from ..utils.config import (
    MAX_LOAD_DEPTH,
    NAMESPACE_ATTRIBUTE,
    SYMBOL_SEPARATOR,
    SYMBOLS_ATTRIBUTE,
    UNIT_MODULE_PREFIX,
)
from ..utils.io_utils import is_regular_file

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def unit_module_name(path: Path) -> str:
    """Stable module name for a unit, unique per resolved path"""
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:16]
    return f"{UNIT_MODULE_PREFIX}{digest}"


class SourceLoader:
    """
    Loads source units into a SymbolTable.

    Loading the same path twice returns the cached LoadedUnit; a unit that
    (directly or through nested lookups) loads itself again raises
    CircularLoadError.
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols
        self.loaded_units: Dict[Path, LoadedUnit] = {}
        self.loading_stack: List[Path] = []

    def is_regular_file(self, path: Optional[PathLike]) -> bool:
        return is_regular_file(path) if path else False

    def load(self, path: PathLike, namespace: str = "") -> LoadedUnit:
        """
        Load a source unit.

        Args:
            path: Unit file path
            namespace: Namespace for the unit's classes when the unit does not
                declare __namespace__ itself

        Returns:
            LoadedUnit describing the executed unit

        Raises:
            SourceLoadError: If the file is missing, unreadable or fails to execute
            CircularLoadError: If the unit is already being loaded
            SymbolRedefinitionError: If a declared class name is already taken;
                nothing from the unit is defined in that case
        """
        file_path = Path(path).resolve()

        # Return cached unit if already loaded
        if file_path in self.loaded_units:
            return self.loaded_units[file_path]

        if file_path in self.loading_stack:
            raise CircularLoadError(file_path, self.loading_stack + [file_path])

        if not file_path.is_file():
            raise SourceLoadError(file_path, "no such file")

        self.loading_stack.append(file_path)
        try:
            if len(self.loading_stack) > MAX_LOAD_DEPTH:
                raise SourceLoadError(
                    file_path, f"load depth {len(self.loading_stack)} exceeds {MAX_LOAD_DEPTH}"
                )

            module = self._execute(file_path)
            unit_namespace = getattr(module, NAMESPACE_ATTRIBUTE, None) or namespace
            unit_namespace = unit_namespace.strip(SYMBOL_SEPARATOR)
            try:
                symbols = self._define_symbols(module, unit_namespace)
            except SymbolRedefinitionError:
                sys.modules.pop(module.__name__, None)
                raise

            unit = LoadedUnit(
                path=file_path,
                module=module,
                namespace=unit_namespace,
                symbols=symbols,
            )
            self.loaded_units[file_path] = unit
            logger.debug(f"Loaded unit {file_path}: {len(symbols)} symbols under '{unit_namespace}'")
            return unit
        finally:
            self.loading_stack.pop()

    def _execute(self, file_path: Path) -> ModuleType:
        """Execute the unit in a fresh module registered in sys.modules"""
        module_name = unit_module_name(file_path)
        loader = importlib.machinery.SourceFileLoader(module_name, str(file_path))
        spec = importlib.util.spec_from_file_location(module_name, file_path, loader=loader)
        module = importlib.util.module_from_spec(spec)
        module.__dict__[SYMBOLS_ATTRIBUTE] = self.symbols
        sys.modules[module_name] = module

        try:
            spec.loader.exec_module(module)
        except AutoloadError:
            # Nested autoload failures already name their own cause
            sys.modules.pop(module_name, None)
            raise
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise SourceLoadError(file_path, f"{type(e).__name__}: {e}") from e
        return module

    def _define_symbols(self, module: ModuleType, namespace: str) -> List[str]:
        """Define every public top-level class the unit declared, or none of them"""
        declared = []
        for name, value in list(vars(module).items()):
            if name.startswith("_"):
                continue
            if not isinstance(value, type) or value.__module__ != module.__name__:
                continue
            symbol = f"{namespace}{SYMBOL_SEPARATOR}{name}" if namespace else name
            declared.append((symbol, value))

        for symbol, value in declared:
            existing = self.symbols.get(symbol)
            if existing is not None and existing is not value:
                raise SymbolRedefinitionError(symbol)
        for symbol, value in declared:
            self.symbols.define(symbol, value)
        return [symbol for symbol, _ in declared]

    def get_unit(self, path: PathLike) -> Optional[LoadedUnit]:
        """Get a loaded unit by path"""
        return self.loaded_units.get(Path(path).resolve())

    def is_unit_loaded(self, path: PathLike) -> bool:
        """Check if a unit is already loaded"""
        return Path(path).resolve() in self.loaded_units
