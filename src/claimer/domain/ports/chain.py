"""Ports for reading on-chain plan and airdrop state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from claimer.domain.model import PlanEntry


@runtime_checkable
class ChainState(Protocol):
    """Read-only view of the ledger the plan registry lives on.

    All time comparisons use ``latest_timestamp`` so the resolver shares the
    registry's time base rather than the local clock.
    """

    def latest_timestamp(self) -> int: ...

    def get_plans(self, account: str) -> Sequence[PlanEntry]: ...

    def merkle_root(self, airdrop_source: str) -> str: ...


__all__ = ["ChainState"]
