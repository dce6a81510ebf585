"""Merkle claims document adapter."""

from __future__ import annotations

from .client import MerkleClaimsClient, MerkleProofAPIError, document_path
from .provider import MerkleProofProvider, build_gearbox_provider, claim_to_proof
from .schema import MerkleClaim, MerkleClaimsDocument

__all__ = [
    "MerkleClaim",
    "MerkleClaimsClient",
    "MerkleClaimsDocument",
    "MerkleProofAPIError",
    "MerkleProofProvider",
    "build_gearbox_provider",
    "claim_to_proof",
    "document_path",
]
