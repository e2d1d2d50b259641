"""Project-wide exception hierarchy.

Only malformed input and failed writes are hard errors. Negative outcomes
(prime, not found, unknown command, corrupted persisted data) are ordinary
results carrying an explanation and never surface here.
"""

from factorlog_store.base import StoreError as BackendStoreError

__all__ = ["FactorlogError", "ValidationError", "StoreError"]


class FactorlogError(Exception):
    """Root exception for factorlog core errors."""


class ValidationError(FactorlogError, ValueError):
    """Raised at record creation when the value is not a storable integer."""


class StoreError(FactorlogError, BackendStoreError):
    """Raised by the repository and engine when a collection could not be saved.

    Also an instance of the backend's StoreError, so callers may catch either.
    """
