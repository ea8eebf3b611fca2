"""
Error Reporting

Exception taxonomy for registration, resolution, loading and preloading,
plus a small formatter used by the command-line entry point.
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Union


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("AUTOLOAD_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ============================================================================
# Exception Classes
# ============================================================================

class AutoloadError(Exception):
    """Base exception for all autoload errors"""
    error_code = "E0001"

    def __init__(self, message: str, help: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.help_text = help

    def __str__(self):
        return self.message


# ---- registration ----------------------------------------------------------

class EmptyAliasError(AutoloadError, ValueError):
    """Raised when a strategy is registered without an alias"""
    error_code = "E0101"

    def __init__(self):
        super().__init__(
            "Autoloader alias cannot be empty.",
            help="pass a non-empty alias so the strategy can be unregistered later",
        )


class DuplicateAliasError(AutoloadError):
    """Raised when a strategy alias is already registered"""
    error_code = "E0102"

    def __init__(self, alias: str):
        super().__init__(
            f"Autoloader alias '{alias}' already exists.",
            help="unregister the existing strategy first or pick another alias",
        )
        self.alias = alias


class RegistrationError(AutoloadError):
    """Raised when the dispatch queue refuses a strategy hook"""
    error_code = "E0103"

    def __init__(self, alias: str, reason: str = ""):
        message = f"Cannot register autoloader '{alias}'."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.alias = alias


# ---- resolution ------------------------------------------------------------

class SymbolNameError(AutoloadError, ValueError):
    """Raised when a symbol name cannot be split into namespace and class name"""
    error_code = "E0201"

    def __init__(self, symbol: str, reason: str):
        super().__init__(
            f"Invalid symbol name '{symbol}': {reason}",
            help="symbol names need at least two levels, e.g. 'Vendor/ClassName'",
        )
        self.symbol = symbol


# ---- loading ---------------------------------------------------------------

class SourceLoadError(AutoloadError):
    """Raised when a source unit exists but cannot be read or executed"""
    error_code = "E0301"

    def __init__(self, path: Union[Path, str], reason: str = ""):
        message = f"Cannot load source unit {path}"
        message = f"{message}: {reason}" if reason else f"{message}."
        super().__init__(message)
        self.path = Path(path)


class CircularLoadError(SourceLoadError):
    """Raised when a source unit re-enters its own loading"""
    error_code = "E0302"

    def __init__(self, path: Union[Path, str], chain: Sequence[Path]):
        joined = " -> ".join(str(p) for p in chain)
        super().__init__(path, f"circular load detected: {joined}")
        self.chain = tuple(chain)


class InvalidHookError(AutoloadError):
    """Raised when a loaded class declares on_autoload but it cannot be called statically"""
    error_code = "E0401"

    def __init__(self, symbol: str):
        super().__init__(
            f"Method on_autoload must be declared as static in {symbol}.",
            help="decorate on_autoload with @staticmethod or @classmethod",
        )
        self.symbol = symbol


class PreloadFailureError(AutoloadError):
    """Raised when a required preload entry cannot be resolved or loaded"""
    error_code = "E0501"

    def __init__(self, symbol: str, reason: str = ""):
        message = f"Cannot preload {symbol}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.symbol = symbol


# ---- host ------------------------------------------------------------------

class SymbolNotFoundError(AutoloadError, LookupError):
    """Raised by the host symbol table when no strategy defined the symbol"""
    error_code = "E0601"

    def __init__(self, symbol: str):
        super().__init__(
            f"Symbol '{symbol}' not found.",
            help="check that a registered strategy resolves this name to an existing file",
        )
        self.symbol = symbol


class SymbolRedefinitionError(AutoloadError):
    """Raised when a symbol is defined twice with different objects"""
    error_code = "E0602"

    def __init__(self, symbol: str):
        super().__init__(f"Cannot declare {symbol}, because the name is already in use.")
        self.symbol = symbol


class BootstrapError(AutoloadError):
    """Raised when startup cannot complete"""
    error_code = "E0701"


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_error(error: BaseException, color: Optional[bool] = None) -> str:
    """
    Render an error as a short diagnostic.

    Example output (plain, no color)::

        error[E0102]: Autoloader alias 'app' already exists.
          = help: unregister the existing strategy first or pick another alias
    """
    use_color = color if color is not None else _use_color()
    code = getattr(error, "error_code", None)
    code_str = f"[{code}]" if code else ""
    lines = [
        _style(f"error{code_str}", _BOLD, _RED, color=use_color)
        + _style(f": {error}", _BOLD, color=use_color)
    ]
    help_text = getattr(error, "help_text", None)
    if help_text:
        lines.append(
            _style("  = ", _BOLD, _BLUE, color=use_color)
            + _style("help: ", _BOLD, color=use_color)
            + help_text
        )
    cause = error.__cause__
    if cause is not None:
        lines.append(f"  caused by: {type(cause).__name__}: {cause}")
    return "\n".join(lines)
