# domain/geometry/exceptions.py
"""Exceptions raised by the geometry domain."""


class GeometryError(Exception):
    """Base exception for geometry operations."""

    pass


class ContractViolation(GeometryError):
    """
    A geometric precondition was broken by the caller.

    Signals a programming bug, not bad input data. Not a ValueError, so
    pydantic validators pass it through instead of wrapping it in a
    ValidationError.
    """

    pass
