"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from claimer.adapters.merkle import build_gearbox_provider
from claimer.adapters.web3_chain import Web3ChainState
from claimer.config import get_chain_config, get_gearbox_config
from claimer.domain.model import outcome_to_payload
from claimer.domain.proof_providers import ProofProviderRegistry
from claimer.domain.resolver import ReadinessResolver
from claimer.domain.transactions import verify_user_args

if TYPE_CHECKING:
    from collections.abc import Mapping

    from claimer.config.proofs import GearboxConfig
    from claimer.domain.model import PlanEntry, ResolutionOutcome
    from claimer.domain.ports.chain import ChainState
    from claimer.domain.selection import SelectionPolicy

log = getLogger(__name__)


@dataclass(slots=True)
class PlanStatus:
    entry: PlanEntry
    due: bool

    def to_payload(self) -> dict[str, object]:
        plan = self.entry.plan
        return {
            "key": self.entry.key,
            "airdrop": plan.airdrop_source,
            "beneficiary": plan.beneficiary,
            "interval": plan.interval,
            "nextExec": plan.next_exec,
            "due": self.due,
        }


def build_default_proof_registry(*, gearbox: GearboxConfig | None = None) -> ProofProviderRegistry:
    """Register every airdrop the resolver knows how to prove claims for."""

    gearbox_config = gearbox or get_gearbox_config()
    registry = ProofProviderRegistry()
    registry.register(gearbox_config.airdrop_address, build_gearbox_provider(gearbox_config))
    return registry


def _default_chain() -> ChainState:
    return Web3ChainState.from_config(get_chain_config())


def resolve_claim_plans(
    contract_address: str,
    *,
    chain: ChainState | None = None,
    proofs: ProofProviderRegistry | None = None,
    policy: SelectionPolicy | None = None,
) -> ResolutionOutcome:
    """Resolve the next claim for ``contract_address`` using the configured adapters."""

    resolver = ReadinessResolver(
        chain=chain or _default_chain(),
        proofs=proofs if proofs is not None else build_default_proof_registry(),
        policy=policy,
    )
    return resolver.resolve(contract_address)


def on_run(
    user_args: Mapping[str, object],
    *,
    chain: ChainState | None = None,
    proofs: ProofProviderRegistry | None = None,
    policy: SelectionPolicy | None = None,
) -> dict[str, object]:
    """Automation framework entry point: validate arguments and resolve one claim.

    Invalid arguments raise before any chain state is read.
    """

    args = verify_user_args(user_args)
    log.info("Resolving claim plans for %s", args.contract_address)
    outcome = resolve_claim_plans(
        args.contract_address,
        chain=chain,
        proofs=proofs,
        policy=policy,
    )
    return outcome_to_payload(outcome)


def list_claim_plans(
    contract_address: str,
    *,
    chain: ChainState | None = None,
) -> list[PlanStatus]:
    """Return the account's plans ordered by next execution, flagged when due."""

    active_chain = chain or _default_chain()
    plans = list(active_chain.get_plans(contract_address))
    if not plans:
        return []
    now = active_chain.latest_timestamp()
    ordered = sorted(plans, key=lambda entry: entry.plan.next_exec)
    return [PlanStatus(entry=entry, due=entry.plan.is_due(now)) for entry in ordered]
