# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validator registry: name -> ValidatorDefinition."""

from __future__ import annotations

import logging
from typing import Dict, Final, Iterable, Iterator, Optional, Tuple

from ..exceptions import ConfigurationError, DuplicateValidatorError, UnknownValidatorError
from .base import ValidatorDefinition
from .builtins import BUILTIN_VALIDATORS

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """An ordered, append-only table of validator definitions.

    Definitions can be added with :meth:`register` but never replaced or
    removed, so a chain bound against a registry keeps seeing the same
    definitions it was built with. A frozen registry rejects registration
    altogether.
    """

    def __init__(self, definitions: Optional[Iterable[ValidatorDefinition]] = None):
        self._definitions: Dict[str, ValidatorDefinition] = {}
        self._frozen = False
        for definition in definitions or ():
            self.register(definition)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def register(self, definition: ValidatorDefinition) -> ValidatorDefinition:
        """Add *definition*; raise DuplicateValidatorError if its name is taken."""

        if self._frozen:
            logger.error("Cannot register '%s': registry is frozen", definition.name)
            raise ConfigurationError(
                f'Cannot register validator "{definition.name}": registry is read-only'
            )

        if definition.name in self._definitions:
            logger.error("Validator '%s' is already registered", definition.name)
            raise DuplicateValidatorError(definition.name)

        self._definitions[definition.name] = definition
        logger.debug(
            "Registered validator '%s' (required options: %s)",
            definition.name,
            sorted(definition.required_options),
        )
        return definition

    def lookup(self, name: str) -> ValidatorDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownValidatorError(name) from None

    def get_definitions(self) -> Tuple[ValidatorDefinition, ...]:
        """Return every definition in registration order."""

        return tuple(self._definitions.values())

    def names(self) -> Tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[ValidatorDefinition]:
        return iter(self.get_definitions())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"ValidatorRegistry(names={list(self._definitions)!r})"


def create_default_registry() -> ValidatorRegistry:
    """Return a fresh, extendable registry holding the built-in validators."""

    return ValidatorRegistry(BUILTIN_VALIDATORS)


def _build_default_registry() -> ValidatorRegistry:
    registry = create_default_registry()
    registry.freeze()
    return registry


_DEFAULT_REGISTRY: Final[ValidatorRegistry] = _build_default_registry()


def get_default_registry() -> ValidatorRegistry:
    """Return the process-wide, read-only registry of built-in validators."""

    return _DEFAULT_REGISTRY


__all__ = [
    "ValidatorRegistry",
    "create_default_registry",
    "get_default_registry",
]
