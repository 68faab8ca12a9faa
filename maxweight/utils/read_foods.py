# -*- coding: utf-8 -*-
"""
I/O helpers for loading the food database.

File format (caret-delimited text):
- first line  : header row, always skipped
- other lines : description^calories^weight_ounces

These map directly to business_objects.items.FoodItem.

Failure modes:
- file cannot be opened or read            -> SourceUnavailableError
- file is not valid UTF-8                  -> MalformedRecordError
- record without exactly three fields      -> MalformedRecordError (whole load fails)
- unparseable number / invalid FoodItem     -> record skipped with a warning
"""

from __future__ import annotations
import logging
from typing import List, Optional, TextIO, Tuple

from maxweight.business_objects.errors import (
    MalformedRecordError,
    SourceUnavailableError,
    StateValidationError,
)
from maxweight.business_objects.items import FoodItem

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
FIELD_COUNT = 3


def _parse_record(fields: List[str], path: str, line_number: int) -> Optional[FoodItem]:
    description, calories_field, weight_field = fields
    try:
        calories = float(calories_field)
        weight = float(weight_field)
    except ValueError:
        logger.warning(
            "%s:%d: skipping record with non-numeric calories/weight: %r",
            path, line_number, FIELD_SEPARATOR.join(fields),
        )
        return None

    try:
        return FoodItem(name=description, calories=calories, weight=weight)
    except StateValidationError as e:
        logger.warning("%s:%d: skipping invalid food: %s", path, line_number, e)
        return None


def _split_fields(line: str) -> List[str]:
    # A trailing separator ends the last field instead of opening an empty one.
    if not line:
        return []
    fields = line.split(FIELD_SEPARATOR)
    if fields[-1] == "":
        fields.pop()
    return fields


def _read_records(f: TextIO, path: str) -> Tuple[List[FoodItem], int]:
    foods: List[FoodItem] = []
    skipped = 0
    for line_number, raw in enumerate(f, start=1):
        # First line is a header row
        if line_number == 1:
            continue

        line = raw.rstrip("\r\n")
        fields = _split_fields(line)
        if len(fields) != FIELD_COUNT:
            raise MalformedRecordError(
                f"{path}:{line_number}: invalid field count; "
                f"want {FIELD_COUNT} but got {len(fields)}. Line: {line!r}"
            )

        food = _parse_record(fields, path, line_number)
        if food is None:
            skipped += 1
            continue
        foods.append(food)
    return foods, skipped


def load_food_database(path: str) -> List[FoodItem]:
    """
    Load all valid food items from the caret-delimited database at `path`.

    Records whose numbers do not parse are skipped. A record with the wrong
    number of fields, or text that is not valid UTF-8, aborts the whole load.

    Raises
    ------
    SourceUnavailableError
        If the file cannot be opened or read.
    MalformedRecordError
        If a record does not have exactly three fields, or the file is not
        valid UTF-8.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(
            f"Failed to load food database; cannot open file: {path}"
        ) from e

    with f:
        try:
            foods, skipped = _read_records(f, path)
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"{path}: not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise SourceUnavailableError(
                f"Failed to load food database; cannot read file: {path}"
            ) from e

    logger.info("Loaded %d foods from %s (%d skipped)", len(foods), path, skipped)
    return foods
