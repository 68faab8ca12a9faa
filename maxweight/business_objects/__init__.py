# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    SourceUnavailableError,
    MalformedRecordError,
    StateValidationError,
    SearchSpaceError,
)
from .items import FoodItem

__all__ = [
    # errors
    "SchemaError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "StateValidationError",
    "SearchSpaceError",
    # core models
    "FoodItem",
]
