# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Okey - a small, synchronous validator chain.

    from okey import ValidatorChain

    chain = ValidatorChain({"required": {}, "integer": {}})
    chain.validate("Test")
    chain.has_error   # True
    chain.errors      # ['error_message_Test_is_not_an_integer']
"""

from .config import ChainConfig, load_chain_config
from .exceptions import (
    ConfigurationError,
    DuplicateValidatorError,
    MissingOptionError,
    OkeyError,
    UnknownValidatorError,
)
from .validation import (
    BoundValidator,
    ProcessResult,
    ValidationResult,
    ValidatorChain,
    ValidatorDefinition,
    ValidatorRegistry,
    create_default_registry,
    get_default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "BoundValidator",
    "ChainConfig",
    "ConfigurationError",
    "DuplicateValidatorError",
    "MissingOptionError",
    "OkeyError",
    "ProcessResult",
    "UnknownValidatorError",
    "ValidationResult",
    "ValidatorChain",
    "ValidatorDefinition",
    "ValidatorRegistry",
    "create_default_registry",
    "get_default_registry",
    "load_chain_config",
]
