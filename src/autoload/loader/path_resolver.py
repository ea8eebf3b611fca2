"""
Symbol Path Resolution

Pure path resolution for autoload strategies: turns a fully-qualified symbol
name into a candidate source file path, or declines.

- Fixed root:  '/srv/app' + 'Acme/Http/Request' -> /srv/app/Acme/Http/Request.py
- Callable:    fn('acme/http', 'Request') -> path, or None/False to decline

This class is stateless and can be shared/reused.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from typing_extensions import TypeAlias

from ..shared.errors import SymbolNameError
from ..utils.config import MIN_SYMBOL_LEVELS, SUFFIX_DELIMITER, SYMBOL_SEPARATOR, source_extension

logger = logging.getLogger(__name__)

PathFn: TypeAlias = Callable[[str, str], Union[str, os.PathLike, None, bool]]
Strategy: TypeAlias = Union[str, os.PathLike, PathFn]


# ==================== RESOLUTION RESULT ====================

class ResolutionTag(Enum):
    """Resolution discriminant"""
    FOUND = "found"
    DECLINED = "declined"


@dataclass(frozen=True)
class Resolution:
    """Resolution result: Found(path) | Declined"""
    tag: ResolutionTag
    path: Optional[Path] = None

    @classmethod
    def found(cls, path: Union[str, os.PathLike]) -> 'Resolution':
        """Strategy produced a candidate path"""
        return cls(ResolutionTag.FOUND, Path(path))

    @classmethod
    def declined(cls) -> 'Resolution':
        """Strategy does not handle this symbol"""
        return cls(ResolutionTag.DECLINED)

    def is_found(self) -> bool:
        return self.tag == ResolutionTag.FOUND

    def is_declined(self) -> bool:
        return self.tag == ResolutionTag.DECLINED

    def unwrap(self) -> Path:
        """Extract the path (throws if Declined)"""
        if self.is_declined():
            raise ValueError("Called unwrap() on a declined resolution")
        return self.path


# ==================== SYMBOL NAMES ====================

@dataclass(frozen=True)
class SymbolComponents:
    """
    A symbol name split for path purposes.

    - namespace: all levels but the last, lower-cased, joined with '/'
    - classname: last level, case preserved
    - levels: every level in original case
    """
    namespace: str
    classname: str
    levels: Tuple[str, ...]


def split_symbol(symbol: str) -> SymbolComponents:
    """
    Split a fully-qualified symbol name.

    Raises:
        SymbolNameError: If the name has fewer than two levels or an empty level

    Examples:
        split_symbol('Acme/Http/Request') -> ('acme/http', 'Request')
        split_symbol('/Acme/Request') -> ('acme', 'Request')
    """
    levels = tuple(symbol.lstrip(SYMBOL_SEPARATOR).split(SYMBOL_SEPARATOR))
    if len(levels) < MIN_SYMBOL_LEVELS:
        raise SymbolNameError(
            symbol, f"expected at least {MIN_SYMBOL_LEVELS} levels, got {len(levels)}"
        )
    if not all(levels):
        raise SymbolNameError(symbol, "empty level")
    namespace = SYMBOL_SEPARATOR.join(level.lower() for level in levels[:-1])
    return SymbolComponents(namespace=namespace, classname=levels[-1], levels=levels)


def namespace_of(symbol: str) -> str:
    """Namespace of a symbol in its original case ('Acme/Http/Request' -> 'Acme/Http')"""
    return SYMBOL_SEPARATOR.join(split_symbol(symbol).levels[:-1])


def split_classname_suffix(classname: str) -> Tuple[str, str]:
    """
    Split a legacy underscore suffix off a class name.

    Examples:
        split_classname_suffix('Arr') -> ('Arr', '')
        split_classname_suffix('Arr_Helper_Extra') -> ('Arr', 'helper_extra')
    """
    base, _, suffix = classname.partition(SUFFIX_DELIMITER)
    return base, suffix.lower()


def suffixed_filename(classname: str, prefix: str = "", extension: Optional[str] = None) -> str:
    """
    File name for a class, carrying its lower-cased underscore suffix.

    Examples:
        suffixed_filename('Arr') -> 'Arr.py'
        suffixed_filename('Arr_Helper', prefix='acme.') -> 'acme.Arr.helper.py'
    """
    if extension is None:
        extension = source_extension()
    base, suffix = split_classname_suffix(classname)
    suffix_part = f".{suffix}" if suffix else ""
    return f"{prefix}{base}{suffix_part}{extension}"


# ==================== PATH RESOLVER ====================

class PathResolver:
    """
    Resolution rule of one autoload strategy.

    A callable strategy receives (namespace, classname) and may decline by
    returning None, False or ''. A fixed-root strategy never declines: it
    always maps the full symbol name under its root, and a missing file is
    left for the caller to notice.
    """

    def __init__(self, strategy: Strategy, extension: Optional[str] = None):
        """
        Args:
            strategy: Root directory or callable (namespace, classname) -> path
            extension: Source extension for fixed-root mode (config default if None)
        """
        self.path_fn: Optional[PathFn] = None
        self.root: Optional[Path] = None
        if callable(strategy):
            self.path_fn = strategy
        elif isinstance(strategy, (str, os.PathLike)):
            if not os.fspath(strategy):
                raise ValueError("Autoloader root path cannot be empty.")
            self.root = Path(strategy)
        else:
            raise TypeError(
                f"Autoloader strategy must be a path or a callable, got {type(strategy).__name__}"
            )
        self.extension = extension if extension is not None else source_extension()

    @property
    def is_callable(self) -> bool:
        return self.path_fn is not None

    def resolve(self, symbol: str) -> Resolution:
        """
        Resolve a symbol to a candidate path.

        Raises:
            SymbolNameError: If the symbol has fewer than two levels
            TypeError: If a callable strategy returns something other than a path
        """
        components = split_symbol(symbol)

        if self.path_fn is not None:
            result = self.path_fn(components.namespace, components.classname)
            if result is None or result is False or result == "":
                return Resolution.declined()
            if not isinstance(result, (str, os.PathLike)):
                raise TypeError(
                    f"Autoloader callable must return a path, None or False, got {type(result).__name__}"
                )
            return Resolution.found(result)

        *namespace_levels, classname = components.levels
        return Resolution.found(self.root.joinpath(*namespace_levels, classname + self.extension))

    def __repr__(self) -> str:
        if self.path_fn is not None:
            name = getattr(self.path_fn, "__qualname__", repr(self.path_fn))
            return f"PathResolver(callable={name})"
        return f"PathResolver(root={self.root}, extension={self.extension!r})"
