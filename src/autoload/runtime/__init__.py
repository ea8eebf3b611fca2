"""Host runtime: symbol table, dispatch queue, source unit loading."""

from .symbols import SymbolTable, normalize_symbol
from .queue import DispatchQueue, LoaderHook
from .unit_info import LoadedUnit
from .source_loader import SourceLoader, unit_module_name

__all__ = [
    'SymbolTable',
    'normalize_symbol',
    'DispatchQueue',
    'LoaderHook',
    'LoadedUnit',
    'SourceLoader',
    'unit_module_name',
]
