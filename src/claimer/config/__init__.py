"""Application configuration helpers."""

from __future__ import annotations

from .chain import ChainConfig, get_chain_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .proofs import GearboxConfig, get_gearbox_config, merkle_resilience_config

__all__ = [
    "ChainConfig",
    "ConfigurationError",
    "GearboxConfig",
    "MissingConfigurationError",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_chain_config",
    "get_gearbox_config",
    "merkle_resilience_config",
    "optional_env_var",
    "require_env_vars",
]
