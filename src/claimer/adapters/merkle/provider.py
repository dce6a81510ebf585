"""Merkle proof providers backed by published claims documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from claimer.domain.model import ClaimProof

from .client import MerkleClaimsClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from claimer.adapters.http_resilience import ResilientClient
    from claimer.config.http_resilience import ResilienceConfig
    from claimer.config.proofs import GearboxConfig

    from .schema import MerkleClaim

log = getLogger(__name__)


def claim_to_proof(claim: MerkleClaim) -> ClaimProof:
    return ClaimProof(index=claim.index, amount=claim.amount, proof=tuple(claim.proof))


@dataclass(slots=True)
class MerkleProofProvider:
    """``ProofProvider`` that looks the beneficiary up in the root's claims document."""

    name: str
    client: MerkleClaimsClient = field(repr=False)

    def __call__(self, beneficiary: str, root: str) -> ClaimProof | None:
        document = self.client.fetch_document(root)
        claim = document.claim_for(beneficiary)
        if claim is None:
            log.info("%s: nothing claimable for %s under root %s", self.name, beneficiary, root)
            return None
        return claim_to_proof(claim)


def build_gearbox_provider(
    config: GearboxConfig,
    *,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> MerkleProofProvider:
    client = MerkleClaimsClient(
        resilience=config.resilience,
        prefix=config.document_prefix,
        client_factory=client_factory,
    )
    return MerkleProofProvider(name="gearbox", client=client)
