# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the Okey validation engine.

Only configuration problems are raised as exceptions. A value that fails
validation is never an exception: it is reported through the chain's
``errors`` / ``has_error`` fields.
"""

from __future__ import annotations

from typing import Optional


class OkeyError(Exception):
    """Base class for every error raised by Okey."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(OkeyError):
    """Raised when a validator chain (or its source file) is misconfigured."""


class UnknownValidatorError(ConfigurationError):
    """Raised when a configuration names a validator the registry does not know."""

    def __init__(self, validator: str, message: Optional[str] = None):
        self.validator = validator
        super().__init__(message or f'Unknown validator type "{validator}"')


class MissingOptionError(ConfigurationError):
    """Raised when a validator is bound without one of its required options."""

    def __init__(self, option: str, validator: str):
        self.option = option
        self.validator = validator
        super().__init__(
            f'"{option}" option is required in order to run "{validator}" validator'
        )


class DuplicateValidatorError(ConfigurationError):
    """Raised when registering a validator under a name that is already taken."""

    def __init__(self, validator: str):
        self.validator = validator
        super().__init__(f'Validator "{validator}" is already registered')


__all__ = [
    "OkeyError",
    "ConfigurationError",
    "UnknownValidatorError",
    "MissingOptionError",
    "DuplicateValidatorError",
]
