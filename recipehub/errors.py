from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a caller violates the contract of a core function."""
