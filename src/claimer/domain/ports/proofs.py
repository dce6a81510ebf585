"""Ports for fetching merkle claim proofs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from claimer.domain.model import ClaimProof


@runtime_checkable
class ProofProvider(Protocol):
    """Callable port returning the claim for ``beneficiary`` under ``root``.

    Returns ``None`` when nothing is claimable. Failures of the underlying
    source must raise rather than return ``None``.
    """

    def __call__(self, beneficiary: str, root: str) -> ClaimProof | None: ...


__all__ = ["ProofProvider"]
