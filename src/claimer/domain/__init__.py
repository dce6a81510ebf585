"""Readiness resolution for recurring airdrop claim plans."""

from __future__ import annotations

from .model import (
    CallData,
    ClaimProof,
    Executable,
    NotExecutable,
    Plan,
    PlanEntry,
    ResolutionOutcome,
    outcome_to_payload,
)
from .proof_providers import ProofProviderRegistry
from .resolver import ReadinessResolver
from .selection import EarliestDuePolicy, RandomDuePolicy, SelectionPolicy

__all__ = [
    "CallData",
    "ClaimProof",
    "EarliestDuePolicy",
    "Executable",
    "NotExecutable",
    "Plan",
    "PlanEntry",
    "ProofProviderRegistry",
    "RandomDuePolicy",
    "ReadinessResolver",
    "ResolutionOutcome",
    "SelectionPolicy",
    "outcome_to_payload",
]
