"""Chain RPC configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

DEFAULT_RPC_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Holds the JSON-RPC endpoint used for plan and airdrop reads."""

    rpc_url: str
    timeout_seconds: float = DEFAULT_RPC_TIMEOUT_SECONDS


def get_chain_config() -> ChainConfig:
    values = require_env_vars(("RPC_URL",))
    timeout = optional_env_var("RPC_TIMEOUT_SECONDS", str(DEFAULT_RPC_TIMEOUT_SECONDS))
    try:
        timeout_seconds = float(timeout)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid RPC_TIMEOUT_SECONDS: {timeout}") from exc
    return ChainConfig(rpc_url=values["RPC_URL"], timeout_seconds=timeout_seconds)
