"""Readiness resolution: decide whether a claim plan can be executed right now."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .model import (
    AIRDROP_NOT_SUPPORTED,
    INVALID_TRANSACTION,
    NO_CLAIM_PLANS,
    NO_CLAIMS_EXECUTABLE,
    Executable,
    NotExecutable,
    ResolutionOutcome,
    invalid_claim_message,
)
from .selection import EarliestDuePolicy
from .transactions import TransactionEncodingError, build_claim_call

if TYPE_CHECKING:
    from .ports.chain import ChainState
    from .proof_providers import ProofProviderRegistry
    from .selection import SelectionPolicy

log = getLogger(__name__)


class ReadinessResolver:
    """Resolve at most one claim plan per invocation into a ready-to-submit call.

    The resolver holds no state between runs. Expected "nothing to do" conditions
    come back as :class:`NotExecutable`; failures of the chain or proof source
    propagate to the caller, which owns retries.
    """

    def __init__(
        self,
        *,
        chain: ChainState,
        proofs: ProofProviderRegistry,
        policy: SelectionPolicy | None = None,
    ) -> None:
        self._chain = chain
        self._proofs = proofs
        self._policy: SelectionPolicy = policy or EarliestDuePolicy()

    def resolve(self, account: str) -> ResolutionOutcome:
        plans = list(self._chain.get_plans(account))
        if not plans:
            return self._not_executable(account, NO_CLAIM_PLANS)

        now = self._chain.latest_timestamp()
        entry = self._policy(plans, now)
        log.debug(
            "Selected plan %s for %s: next_exec=%s, now=%s, plans=%s",
            entry.key,
            account,
            entry.plan.next_exec,
            now,
            len(plans),
        )

        if not entry.plan.is_due(now):
            return self._not_executable(account, NO_CLAIMS_EXECUTABLE)

        provider = self._proofs.get(entry.plan.airdrop_source)
        if provider is None:
            return self._not_executable(account, AIRDROP_NOT_SUPPORTED)

        root = self._chain.merkle_root(entry.plan.airdrop_source)
        claim = provider(account, root)
        if claim is None:
            return self._not_executable(account, invalid_claim_message(entry.key))

        try:
            call = build_claim_call(account, entry.key, claim)
        except TransactionEncodingError as exc:
            log.warning("Unable to build claim for plan %s: %s", entry.key, exc)
            return self._not_executable(account, INVALID_TRANSACTION)
        if not call.to or not call.data:
            return self._not_executable(account, INVALID_TRANSACTION)

        log.info(
            "Claim executable for %s: plan=%s, index=%s, amount=%s",
            account,
            entry.key,
            claim.index,
            claim.amount,
        )
        return Executable(call=call)

    @staticmethod
    def _not_executable(account: str, message: str) -> NotExecutable:
        log.info("Nothing to execute for %s: %s", account, message)
        return NotExecutable(message=message)


__all__ = ["ReadinessResolver"]
