# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in validators.

Every processor has the signature ``(value, options) -> ProcessResult``. On
success it returns the value the next validator should see (coerced where the
validator coerces), on failure the filled-in message template.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Tuple, Union

from .base import ProcessResult, ValidatorDefinition
from .messages import format_message, stringify

_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")
_INTEGER_PATTERN = re.compile(r"[-+]?\d+(?:\.0*)?")


def _as_integer(value: Any) -> Optional[int]:
    """Return *value* as an int when it is exactly integral, else None."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text.split(".", 1)[0])
    return None


def _as_number(value: Any) -> Optional[Union[int, float]]:
    """Return *value* as a comparable number, or None if it is not numeric.

    Ints are returned unchanged so bounds checks on large values stay exact.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def process_required(value: Any, options: Mapping[str, Any]) -> ProcessResult:
    if value is None or value == "":
        return ProcessResult.failure(format_message("required"))
    return ProcessResult.success(value)


def process_min_length(value: Any, options: Mapping[str, Any]) -> ProcessResult:
    min_length = options["minLength"]
    try:
        length = len(value)
    except TypeError:
        length = None

    if length is None or length < min_length:
        return ProcessResult.failure(
            format_message("minLength", value=value, min_length=min_length)
        )
    return ProcessResult.success(value)


def process_is_number(value: Any, options: Mapping[str, Any]) -> ProcessResult:
    text = stringify(value)
    if not _NUMBER_PATTERN.fullmatch(text):
        return ProcessResult.failure(format_message("notNumber", value=value))
    return ProcessResult.success(float(text))


def process_integer(value: Any, options: Mapping[str, Any]) -> ProcessResult:
    coerced = _as_integer(value)
    if coerced is None:
        return ProcessResult.failure(format_message("notInt", value=value))
    return ProcessResult.success(coerced)


def process_range(value: Any, options: Mapping[str, Any]) -> ProcessResult:
    start = options["start"]
    end = options["end"]
    number = _as_number(value)

    failure = ProcessResult.failure(
        format_message("outOfRange", value=value, start=start, end=end)
    )
    if number is None or number < start or number > end:
        return failure

    # Always coerces to float, even when an earlier validator produced an int
    try:
        return ProcessResult.success(float(number))
    except OverflowError:
        return failure


BUILTIN_VALIDATORS: Tuple[ValidatorDefinition, ...] = (
    ValidatorDefinition(
        name="required",
        processor=process_required,
        description="Rejects None and empty-string values.",
    ),
    ValidatorDefinition(
        name="minLength",
        processor=process_min_length,
        required_options=frozenset({"minLength"}),
        option_types={"minLength": (int,)},
        description="Rejects values shorter than minLength.",
    ),
    ValidatorDefinition(
        name="isNumber",
        processor=process_is_number,
        description="Rejects non-numeric string forms; coerces to float.",
    ),
    ValidatorDefinition(
        name="integer",
        processor=process_integer,
        description="Rejects non-integral values; coerces to int.",
    ),
    ValidatorDefinition(
        name="range",
        processor=process_range,
        required_options=frozenset({"start", "end"}),
        option_types={"start": (int, float), "end": (int, float)},
        description="Rejects values outside [start, end]; coerces to float.",
    ),
)


__all__ = [
    "BUILTIN_VALIDATORS",
    "process_integer",
    "process_is_number",
    "process_min_length",
    "process_range",
    "process_required",
]
