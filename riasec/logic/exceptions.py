"""Errors raised by the matching engine and the catalog data access layer."""


class MatchingError(Exception):
    """Base class for matching failures."""


class InvalidInputError(MatchingError, ValueError):
    """The match code is missing, empty, or contains non-RIASEC letters."""


class InvalidDimensionError(MatchingError, ValueError):
    """The dominant dimension is not one of R, I, A, S, E, C."""


class DataAccessError(MatchingError):
    """Any failure of the underlying data store; carries the driver message."""
