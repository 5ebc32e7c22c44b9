"""Validation package - validator definitions, registry and the chain executor.

Per-value failures are reported as data (``errors`` / ``has_error``); only
misconfiguration raises.
"""

from .base import BoundValidator, ProcessResult, ValidationResult, ValidatorDefinition
from .builtins import BUILTIN_VALIDATORS
from .chain import ValidatorChain
from .messages import ERROR_MESSAGES, format_message
from .registry import ValidatorRegistry, create_default_registry, get_default_registry

__all__ = [
    "BUILTIN_VALIDATORS",
    "BoundValidator",
    "ERROR_MESSAGES",
    "ProcessResult",
    "ValidationResult",
    "ValidatorChain",
    "ValidatorDefinition",
    "ValidatorRegistry",
    "create_default_registry",
    "format_message",
    "get_default_registry",
]
