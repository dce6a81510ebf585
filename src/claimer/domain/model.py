"""Claim plan and resolution outcome types (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

NO_CLAIM_PLANS: Final[str] = "No claim plans"
NO_CLAIMS_EXECUTABLE: Final[str] = "No claims executable"
AIRDROP_NOT_SUPPORTED: Final[str] = "Airdrop distributor not supported"
INVALID_TRANSACTION: Final[str] = "Invalid transaction"


def invalid_claim_message(key: str) -> str:
    return f"Invalid claim for: {key}"


@dataclass(frozen=True, slots=True)
class Plan:
    """A recurring claim intent as stored by the on-chain registry."""

    airdrop_source: str
    beneficiary: str
    interval: int
    next_exec: int

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError(f"Plan interval must be non-negative: {self.interval}")
        if self.next_exec < 0:
            raise ValueError(f"Plan next_exec must be non-negative: {self.next_exec}")

    def is_due(self, now: int) -> bool:
        return self.next_exec <= now


@dataclass(frozen=True, slots=True)
class PlanEntry:
    """A plan together with the registry key it is stored under."""

    key: str
    plan: Plan


@dataclass(frozen=True, slots=True)
class ClaimProof:
    """Merkle claim data for one beneficiary, forwarded verbatim to ``claim``."""

    index: int
    amount: int
    proof: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CallData:
    to: str
    data: str
    value: int | None = None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"to": self.to, "data": self.data}
        if self.value is not None:
            payload["value"] = str(self.value)
        return payload


@dataclass(frozen=True, slots=True)
class NotExecutable:
    message: str

    @property
    def can_exec(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Executable:
    call: CallData

    @property
    def can_exec(self) -> Literal[True]:
        return True

    @property
    def call_data(self) -> tuple[CallData, ...]:
        # At most one claim is resolved per run.
        return (self.call,)


type ResolutionOutcome = NotExecutable | Executable


def outcome_to_payload(outcome: ResolutionOutcome) -> dict[str, object]:
    """Render an outcome in the shape the automation framework expects."""

    if isinstance(outcome, Executable):
        return {
            "canExec": True,
            "callData": [call.to_payload() for call in outcome.call_data],
        }
    return {"canExec": False, "message": outcome.message}


__all__ = [
    "AIRDROP_NOT_SUPPORTED",
    "INVALID_TRANSACTION",
    "NO_CLAIMS_EXECUTABLE",
    "NO_CLAIM_PLANS",
    "CallData",
    "ClaimProof",
    "Executable",
    "NotExecutable",
    "Plan",
    "PlanEntry",
    "ResolutionOutcome",
    "invalid_claim_message",
    "outcome_to_payload",
]
