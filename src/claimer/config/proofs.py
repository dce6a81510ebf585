"""Proof source configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from web3 import Web3

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy

GEARBOX_AIRDROP_ADDRESS = "0xa7df60785e556d65292a2c9a077bb3a8fbf048bc"
GEARBOX_MERKLE_API = "https://raw.githubusercontent.com/Gearbox-protocol/rewards/master/merkle"
GEARBOX_DOCUMENT_PREFIX = "mainnet_"
MERKLE_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class GearboxConfig:
    """Where the Gearbox airdrop lives and where its claims files are published."""

    airdrop_address: str
    merkle_api: str
    resilience: ResilienceConfig
    document_prefix: str = GEARBOX_DOCUMENT_PREFIX


def merkle_resilience_config(name: str, base_url: str) -> ResilienceConfig:
    # Retries belong to the automation framework; fail the run instead.
    # Documents are fetched fresh on every resolution, nothing is cached.
    return ResilienceConfig(
        name=name,
        base_url=base_url.rstrip("/") + "/",
        timeout_seconds=MERKLE_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=0),
    )


def get_gearbox_config() -> GearboxConfig:
    address = optional_env_var("GEARBOX_AIRDROP_ADDRESS", GEARBOX_AIRDROP_ADDRESS)
    if not Web3.is_address(address):
        raise ConfigurationError(f"Invalid GEARBOX_AIRDROP_ADDRESS: {address}")
    merkle_api = optional_env_var("GEARBOX_MERKLE_API", GEARBOX_MERKLE_API)
    return GearboxConfig(
        airdrop_address=Web3.to_checksum_address(address),
        merkle_api=merkle_api,
        resilience=merkle_resilience_config("gearbox", merkle_api),
    )
