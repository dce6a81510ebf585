from __future__ import annotations

import pytest

from claimer.domain.model import ClaimProof
from claimer.domain.proof_providers import ProofProviderRegistry
from claimer.domain.resolver import ReadinessResolver
from tests.support.ledger import (
    ACCOUNT,
    AIRDROP,
    ROOT,
    UNSUPPORTED_AIRDROP,
    FakeAirdrop,
    FakeLedger,
    bytes32,
)


@pytest.fixture
def account() -> str:
    return ACCOUNT


@pytest.fixture
def claim_proof() -> ClaimProof:
    return ClaimProof(index=0, amount=500, proof=(bytes32(0x11), bytes32(0x22)))


@pytest.fixture
def airdrop(claim_proof: ClaimProof) -> FakeAirdrop:
    distributor = FakeAirdrop(address=AIRDROP, root=ROOT)
    distributor.publish(ROOT, {ACCOUNT: claim_proof})
    return distributor


@pytest.fixture
def ledger(airdrop: FakeAirdrop) -> FakeLedger:
    chain = FakeLedger()
    chain.add_airdrop(airdrop)
    chain.add_airdrop(FakeAirdrop(address=UNSUPPORTED_AIRDROP, root=bytes32(0x02)))
    return chain


@pytest.fixture
def proofs(airdrop: FakeAirdrop) -> ProofProviderRegistry:
    return ProofProviderRegistry({AIRDROP: airdrop})


@pytest.fixture
def resolver(ledger: FakeLedger, proofs: ProofProviderRegistry) -> ReadinessResolver:
    return ReadinessResolver(chain=ledger, proofs=proofs)
