# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file violates the expected food database format."""


class SourceUnavailableError(SchemaError):
    """Raised when the food database cannot be opened."""


class MalformedRecordError(SchemaError):
    """Raised when a food database record does not have exactly three fields."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class SearchSpaceError(ValueError):
    """Raised when an exhaustive search is asked to enumerate too many items."""
