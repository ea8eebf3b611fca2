"""
Shared components: error taxonomy and diagnostics.
"""

from .errors import (
    AutoloadError,
    EmptyAliasError, DuplicateAliasError, RegistrationError,
    SymbolNameError,
    SourceLoadError, CircularLoadError,
    InvalidHookError, PreloadFailureError,
    SymbolNotFoundError, SymbolRedefinitionError,
    BootstrapError,
    format_error,
)
