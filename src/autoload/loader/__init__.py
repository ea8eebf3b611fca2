"""Autoload core: path resolution, strategy registry, dispatch, preloading."""

from .path_resolver import (
    PathResolver, Resolution, ResolutionTag, SymbolComponents,
    split_symbol, namespace_of, split_classname_suffix, suffixed_filename,
)
from .registry import LoaderRegistry, StrategyHook
from .dispatcher import Autoloadable, SymbolLoadDispatcher
from .preload import PreloadRunner
from .service import Autoload

__all__ = [
    'PathResolver',
    'Resolution',
    'ResolutionTag',
    'SymbolComponents',
    'split_symbol',
    'namespace_of',
    'split_classname_suffix',
    'suffixed_filename',
    'LoaderRegistry',
    'StrategyHook',
    'Autoloadable',
    'SymbolLoadDispatcher',
    'PreloadRunner',
    'Autoload',
]
