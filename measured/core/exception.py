"""
Exception types raised by measured.
"""


class CustomException(Exception):
    """Base class for every error raised by the package itself."""


class UnsupportedDeclarationError(CustomException, TypeError):
    """
    Raised at decoration time when the decorated item cannot be instrumented.

    Covers items that are not plain functions, functions without a bounded
    body (abstract methods, generators) and a sync/async marker applied to a
    function of the other calling convention.
    """


class ConfigurationError(CustomException, ValueError):
    """Raised when the configured metrics backend cannot be built."""
