# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for the validator registry."""

from __future__ import annotations

import pytest

from okey.exceptions import ConfigurationError, DuplicateValidatorError, UnknownValidatorError
from okey.validation import (
    BUILTIN_VALIDATORS,
    ProcessResult,
    ValidatorDefinition,
    ValidatorRegistry,
    create_default_registry,
    get_default_registry,
)


def _noop(value, options):
    return ProcessResult.success(value)


def test_default_registry_lists_builtins_in_order():
    names = [definition.name for definition in get_default_registry().get_definitions()]

    assert names == ["required", "minLength", "isNumber", "integer", "range"]


@pytest.mark.parametrize(
    "name,required",
    [
        ("required", set()),
        ("minLength", {"minLength"}),
        ("isNumber", set()),
        ("integer", set()),
        ("range", {"start", "end"}),
    ],
)
def test_builtin_required_options(name, required):
    definition = get_default_registry().lookup(name)

    assert definition.name == name
    assert definition.required_options == frozenset(required)
    assert definition.description


def test_lookup_unknown_name_raises():
    with pytest.raises(UnknownValidatorError) as exc_info:
        get_default_registry().lookup("email")

    assert exc_info.value.validator == "email"


def test_default_registry_is_shared_and_read_only():
    registry = get_default_registry()

    assert registry is get_default_registry()
    assert registry.frozen is True
    with pytest.raises(ConfigurationError):
        registry.register(ValidatorDefinition(name="noop", processor=_noop))
    assert "noop" not in registry


def test_create_default_registry_returns_independent_copy():
    registry = create_default_registry()
    registry.register(ValidatorDefinition(name="noop", processor=_noop))

    assert "noop" in registry
    assert "noop" not in get_default_registry()
    assert len(registry) == len(BUILTIN_VALIDATORS) + 1


def test_duplicate_registration_is_rejected():
    registry = ValidatorRegistry()
    registry.register(ValidatorDefinition(name="noop", processor=_noop))

    with pytest.raises(DuplicateValidatorError) as exc_info:
        registry.register(ValidatorDefinition(name="noop", processor=_noop))

    assert exc_info.value.validator == "noop"
    assert len(registry) == 1


def test_freeze_blocks_further_registration():
    registry = ValidatorRegistry([ValidatorDefinition(name="noop", processor=_noop)])
    registry.freeze()

    with pytest.raises(ConfigurationError):
        registry.register(ValidatorDefinition(name="other", processor=_noop))


def test_registry_iteration_and_names():
    registry = create_default_registry()

    assert registry.names() == tuple(d.name for d in registry)
    assert "integer" in registry
    assert "Integer" not in registry


def test_definition_normalises_required_options():
    definition = ValidatorDefinition(name="pair", processor=_noop, required_options=["a", "b", "a"])

    assert definition.required_options == frozenset({"a", "b"})
    assert definition.process(1, {}) == ProcessResult.success(1)


@pytest.mark.parametrize(
    "options,invalid",
    [
        ({"start": 1, "end": 5}, []),
        ({"start": 1.5, "end": 5}, []),
        ({"start": "1", "end": 5}, ["start"]),
        ({"start": True, "end": None}, ["start"]),
        ({}, []),
    ],
)
def test_builtin_range_reports_wrongly_typed_options(options, invalid):
    definition = get_default_registry().lookup("range")

    assert definition.invalid_options(options) == invalid
