# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validator chain: binds a configuration against the registry and runs values through it."""

from __future__ import annotations

import copy
import logging
import time
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from ..config import ChainConfig, load_chain_config
from ..exceptions import ConfigurationError, MissingOptionError, UnknownValidatorError
from ..telemetry import metrics as _metrics
from .base import BoundValidator, ProcessResult, ValidationResult, ValidatorDefinition
from .registry import ValidatorRegistry, get_default_registry

logger = logging.getLogger(__name__)


class ValidatorChain:
    """Run a value through an ordered list of bound validators.

    Example:
        ```python
        chain = ValidatorChain({"required": {}, "integer": {}})
        chain.validate("42")    # -> 42
        chain.has_error         # -> False
        chain.validate(None)    # -> None
        chain.errors            # -> ["error_message_required"]
        ```

    The chain keeps the state of the last ``validate`` call (``value``,
    ``errors``, ``has_error``), so one instance must not be shared between
    threads. Build one chain per thread from the same configuration instead.
    """

    def __init__(
        self,
        config: Mapping[str, Optional[Mapping[str, Any]]],
        *,
        break_on_error: bool = True,
        registry: Optional[ValidatorRegistry] = None,
    ):
        self.registry = registry if registry is not None else get_default_registry()
        # Stop at the first failing validator. With two validators, 'required'
        # and 'integer', 'integer' only runs after a failed 'required' when
        # this is False.
        self.break_on_error = break_on_error
        self._result = ValidationResult()
        self._validators: Tuple[BoundValidator, ...] = tuple(self._bind(config))

    @classmethod
    def from_config(
        cls,
        config: ChainConfig,
        *,
        registry: Optional[ValidatorRegistry] = None,
    ) -> "ValidatorChain":
        return cls(config.validators, break_on_error=config.break_on_error, registry=registry)

    @classmethod
    def from_file(
        cls,
        path: Optional[Union[str, Path]] = None,
        *,
        registry: Optional[ValidatorRegistry] = None,
    ) -> "ValidatorChain":
        """Build a chain from a YAML/JSON file (defaults to ``OKEY_CHAIN_FILE``)."""

        return cls.from_config(load_chain_config(path), registry=registry)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def _bind(self, config: Any) -> List[BoundValidator]:
        if not isinstance(config, Mapping):
            logger.error("Chain configuration is a %s, not a mapping", type(config).__name__)
            _metrics.record_bind_failure("invalid_config")
            raise ConfigurationError(
                f"Validator configuration must be a mapping of name -> options, got {type(config).__name__}"
            )

        bound: List[BoundValidator] = []
        for name, options in config.items():
            try:
                definition = self.registry.lookup(name)
            except UnknownValidatorError:
                logger.error("Unknown validator '%s' in chain configuration", name)
                _metrics.record_bind_failure("unknown_validator")
                raise

            bound.append(
                BoundValidator(
                    name=definition.name,
                    options=self._validate_options(definition, options),
                    definition=definition,
                )
            )
            logger.debug("Bound validator '%s' with options %s", definition.name, options)

        return bound

    @staticmethod
    def _validate_options(definition: ValidatorDefinition, options: Any) -> Mapping[str, Any]:
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            logger.error(
                "Options for validator '%s' are a %s, not a mapping",
                definition.name,
                type(options).__name__,
            )
            _metrics.record_bind_failure("invalid_options")
            raise ConfigurationError(
                f'Options for "{definition.name}" validator must be a mapping, got {type(options).__name__}'
            )

        for option_key in sorted(definition.required_options):
            if options.get(option_key) is None:
                logger.error(
                    "Validator '%s' is missing required option '%s'",
                    definition.name,
                    option_key,
                )
                _metrics.record_bind_failure("missing_option")
                raise MissingOptionError(option_key, definition.name)

        invalid = definition.invalid_options(options)
        if invalid:
            logger.error(
                "Validator '%s' has option(s) of the wrong type: %s",
                definition.name,
                ", ".join(invalid),
            )
            _metrics.record_bind_failure("invalid_option_type")
            expected = {key: [t.__name__ for t in definition.option_types[key]] for key in invalid}
            raise ConfigurationError(
                f'Invalid option type(s) for "{definition.name}" validator: {expected} expected'
            )

        # Copy so later changes to the caller's objects never reach the chain
        return MappingProxyType(copy.deepcopy(dict(options)))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def validate(self, value: Any) -> Any:
        """Validate *value* passing it to each validator in order.

        Returns the final (possibly coerced) value. Failures never raise;
        check ``has_error`` / ``errors`` afterwards.
        """
        started_at = time.perf_counter()
        result = ValidationResult(value=value)
        self._result = result
        failed: List[str] = []

        for validator in self._validators:
            outcome = self._run(validator, result.value)
            if outcome.ok:
                result.value = outcome.value
                continue

            result.add_error(outcome.message)
            failed.append(validator.name)
            logger.debug("Validator '%s' rejected %r: %s", validator.name, result.value, outcome.message)

            if self.break_on_error:
                break

        _metrics.record_validation_metrics(failed, started_at)
        return result.value

    @staticmethod
    def _run(validator: BoundValidator, value: Any) -> ProcessResult:
        try:
            return validator.process(value)
        except Exception as exc:
            logger.warning(
                "Validator '%s' raised %s while processing %r",
                validator.name,
                type(exc).__name__,
                value,
                exc_info=True,
            )
            return ProcessResult.failure(f'"{validator.name}" validator failed: {exc}')

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_sub_validator(self, name: str) -> Optional[BoundValidator]:
        """Return the first bound validator called *name*, or None."""

        for validator in self._validators:
            if validator.name == name:
                return validator
        return None

    @property
    def validators(self) -> Tuple[BoundValidator, ...]:
        return self._validators

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def value(self) -> Any:
        return self._result.value

    @property
    def errors(self) -> List[str]:
        return self._result.errors

    @property
    def has_error(self) -> bool:
        return self._result.has_error

    def __iter__(self) -> Iterator[BoundValidator]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        names = [validator.name for validator in self._validators]
        return f"ValidatorChain(validators={names!r}, break_on_error={self.break_on_error!r})"


__all__ = ["ValidatorChain"]
