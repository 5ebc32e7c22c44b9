"""Chain configuration loading."""

from .loader import (
    BREAK_ON_ERROR_ENV,
    CHAIN_FILE_ENV,
    ChainConfig,
    load_chain_config,
    parse_chain_config,
    resolve_config_path,
)

__all__ = [
    "BREAK_ON_ERROR_ENV",
    "CHAIN_FILE_ENV",
    "ChainConfig",
    "load_chain_config",
    "parse_chain_config",
    "resolve_config_path",
]
