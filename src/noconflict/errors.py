"""Error definitions for noconflict.

Expected conditions (absent symbols, unresolvable parents) are reported
through return values. These exceptions cover programming and configuration
mistakes only.
"""


class NoConflictError(Exception):
    """Base class for all noconflict errors."""


class InvalidSymbolError(NoConflictError, TypeError):
    """Raised when a symbol is neither a dotted string nor a sequence of segments."""


class ConfigurationError(NoConflictError, RuntimeError):
    """Raised when configuration values are invalid."""
