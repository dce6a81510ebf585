"""Shared fixtures for merkle adapter tests."""

from __future__ import annotations

import pytest

from claimer.config.http_resilience import ResilienceConfig
from claimer.config.proofs import GearboxConfig, merkle_resilience_config
from tests.support.ledger import address, bytes32

BASE_URL = "https://claims.example.com/merkle/"
ROOT = bytes32(0xAB)
BENEFICIARY = address(0xC3)


@pytest.fixture
def resilience() -> ResilienceConfig:
    return merkle_resilience_config("merkle-test", BASE_URL)


@pytest.fixture
def gearbox_config(resilience: ResilienceConfig) -> GearboxConfig:
    return GearboxConfig(
        airdrop_address=address(0xA1),
        merkle_api=BASE_URL,
        resilience=resilience,
    )


@pytest.fixture
def claims_document() -> dict[str, object]:
    return {
        "merkleRoot": ROOT,
        "tokenTotal": "0x3635c9adc5dea00000",
        "claims": {
            BENEFICIARY: {
                "index": 3,
                "amount": "0x01f4",
                "proof": [bytes32(0x11), bytes32(0x22).upper().replace("0X", "0x")],
            },
            address(0xD4): {
                "index": 4,
                "amount": "1000",
                "proof": [bytes32(0x33)],
            },
        },
    }
