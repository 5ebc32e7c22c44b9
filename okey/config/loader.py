# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Load validator chain configurations from YAML or JSON files.

A chain file looks like::

    break_on_error: true
    validators:
      required: {}
      range: {start: 1, end: 5}

Validator order in the file is the execution order.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CHAIN_FILE_ENV = "OKEY_CHAIN_FILE"
BREAK_ON_ERROR_ENV = "OKEY_BREAK_ON_ERROR"

_YAML_SUFFIXES = (".yaml", ".yml")
_JSON_SUFFIXES = (".json",)
_KNOWN_KEYS = {"break_on_error", "validators"}
_FALSE_VALUES = ("", "0", "false", "no", "off")


@dataclass
class ChainConfig:
    """Validator configuration read from a file, ready for ``ValidatorChain.from_config``."""

    validators: Dict[str, Optional[Dict[str, Any]]] = field(default_factory=dict)
    break_on_error: bool = True
    source: Optional[Path] = None


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Return *path*, or the file named by ``OKEY_CHAIN_FILE`` when *path* is None."""

    if path is None:
        env_path = os.getenv(CHAIN_FILE_ENV)
        if not env_path:
            raise ConfigurationError(
                f"No chain configuration given and {CHAIN_FILE_ENV} is not set"
            )
        path = env_path

    resolved = Path(path).expanduser()
    if not resolved.is_file():
        raise ConfigurationError(f"Chain configuration file not found: {resolved}")
    return resolved


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if suffix in _JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc

    raise ConfigurationError(
        f"Unsupported chain configuration format '{suffix}' for {path} "
        f"(expected one of {', '.join(_YAML_SUFFIXES + _JSON_SUFFIXES)})"
    )


def parse_chain_config(document: Any, *, source: Optional[Path] = None) -> ChainConfig:
    """Turn a decoded YAML/JSON document into a ChainConfig.

    Only the document shape is checked here; validator names and their
    required options are checked when the chain is bound.
    """
    where = f" in {source}" if source else ""

    if not isinstance(document, Mapping):
        raise ConfigurationError(f"Chain configuration{where} must be a mapping")

    unknown = set(document) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s){where}: {sorted(unknown)} (expected {sorted(_KNOWN_KEYS)})"
        )

    validators = document.get("validators") or {}
    if not isinstance(validators, Mapping):
        raise ConfigurationError(f"'validators'{where} must be a mapping of name -> options")

    break_on_error = document.get("break_on_error", True)
    if not isinstance(break_on_error, bool):
        raise ConfigurationError(f"'break_on_error'{where} must be true or false")

    env_override = os.getenv(BREAK_ON_ERROR_ENV)
    if env_override is not None:
        break_on_error = env_override.strip().lower() not in _FALSE_VALUES
        logger.debug("%s overrides break_on_error -> %s", BREAK_ON_ERROR_ENV, break_on_error)

    return ChainConfig(
        validators={str(name): options for name, options in validators.items()},
        break_on_error=break_on_error,
        source=source,
    )


def load_chain_config(path: Optional[Union[str, Path]] = None) -> ChainConfig:
    """Read and parse a chain configuration file."""

    resolved = resolve_config_path(path)
    config = parse_chain_config(_read_document(resolved), source=resolved)
    logger.info(
        "Loaded chain configuration from %s (%d validators, break_on_error=%s)",
        resolved,
        len(config.validators),
        config.break_on_error,
    )
    return config


__all__ = [
    "BREAK_ON_ERROR_ENV",
    "CHAIN_FILE_ENV",
    "ChainConfig",
    "load_chain_config",
    "parse_chain_config",
    "resolve_config_path",
]
