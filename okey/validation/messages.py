# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Error message templates for the built-in validators.

Templates are plain data. Consumers parse these strings, so both the keys and
the text must stay stable; placeholders use the ``%name%`` form.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Final, Mapping

ERROR_MESSAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "required": "error_message_required",
        "notNumber": "error_message_%value%_is_not_a_number",
        "notInt": "error_message_%value%_is_not_an_integer",
        "outOfRange": "error_message_%value%_is_out_of_range_%start%_%end%",
        "minLength": "error_message_%value%_length_is_not_greater_than_%min_length%",
    }
)


def stringify(value: Any) -> str:
    """Render *value* the way it appears inside an error message."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_message(key: str, **placeholders: Any) -> str:
    """Fill the template registered under *key*.

    Keyword names map to placeholders, e.g. ``min_length=3`` fills
    ``%min_length%``.
    """

    message = ERROR_MESSAGES[key]
    for name, replacement in placeholders.items():
        message = message.replace(f"%{name}%", stringify(replacement), 1)
    return message


__all__ = ["ERROR_MESSAGES", "format_message", "stringify"]
