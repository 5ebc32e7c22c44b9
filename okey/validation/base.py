# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core data structures shared by the registry and the validator chain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, FrozenSet, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of running a single validator against a value.

    A successful result carries the (possibly coerced) value; a failed one
    carries the human-readable error message. Processors return these instead
    of raising so that bad input data never unwinds the chain.
    """

    ok: bool
    value: Any = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ProcessResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message: str) -> "ProcessResult":
        return cls(ok=False, message=message)


Processor = Callable[[Any, Mapping[str, Any]], ProcessResult]


@dataclass(frozen=True)
class ValidatorDefinition:
    """A named rule registered once and shared read-only by every chain."""

    name: str
    processor: Processor = field(repr=False)
    required_options: FrozenSet[str] = frozenset()
    description: str = ""
    # option key -> accepted types; bools never count as numbers
    option_types: Mapping[str, Tuple[type, ...]] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Accept any iterable of option keys but always store a frozenset
        object.__setattr__(self, "required_options", frozenset(self.required_options))
        object.__setattr__(self, "option_types", MappingProxyType(dict(self.option_types)))

    def invalid_options(self, options: Mapping[str, Any]) -> List[str]:
        """Return the keys of *options* whose values have the wrong type."""

        invalid = []
        for key, types in self.option_types.items():
            if key not in options or options[key] is None:
                continue
            value = options[key]
            if isinstance(value, bool) or not isinstance(value, types):
                invalid.append(key)
            elif isinstance(value, float) and math.isnan(value):
                invalid.append(key)
        return invalid

    def process(self, value: Any, options: Mapping[str, Any]) -> ProcessResult:
        return self.processor(value, options)


@dataclass(frozen=True)
class BoundValidator:
    """A definition paired with the options a chain was configured with."""

    name: str
    options: Mapping[str, Any]
    definition: ValidatorDefinition = field(repr=False)

    def process(self, value: Any) -> ProcessResult:
        return self.definition.process(value, self.options)


@dataclass
class ValidationResult:
    """State of the most recent ``ValidatorChain.validate`` call."""

    value: Any = None
    errors: List[str] = field(default_factory=list)
    has_error: bool = False

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.has_error = True


__all__ = [
    "BoundValidator",
    "ProcessResult",
    "Processor",
    "ValidationResult",
    "ValidatorDefinition",
]
