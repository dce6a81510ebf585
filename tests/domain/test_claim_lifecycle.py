"""Plan lifecycle against the in-memory Claimer: create, claim, wait, remove."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from claimer.domain.model import (
    NO_CLAIM_PLANS,
    NO_CLAIMS_EXECUTABLE,
    Executable,
    NotExecutable,
    invalid_claim_message,
)
from tests.support.ledger import AIRDROP, ClaimRejectedError, bytes32

if TYPE_CHECKING:
    from claimer.domain.resolver import ReadinessResolver
    from tests.support.ledger import FakeAirdrop, FakeLedger


def test_full_claim_lifecycle(
    resolver: ReadinessResolver,
    ledger: FakeLedger,
    airdrop: FakeAirdrop,
    account: str,
) -> None:
    assert resolver.resolve(account) == NotExecutable(message=NO_CLAIM_PLANS)

    key = ledger.create_plan(account, AIRDROP, account, interval=100, initial_delay=0)

    outcome = resolver.resolve(account)
    assert isinstance(outcome, Executable)
    ledger.execute(outcome.call)
    assert airdrop.claimed == {0}
    assert ledger.get_plans(account)[0].plan.next_exec == 100

    # The distributor rotates its root once the claim is spent.
    airdrop.publish(bytes32(0x04), {})

    ledger.advance(1)
    assert resolver.resolve(account) == NotExecutable(message=NO_CLAIMS_EXECUTABLE)

    ledger.advance(99)
    assert resolver.resolve(account) == NotExecutable(message=invalid_claim_message(key))

    ledger.remove_plan(account, key)
    assert resolver.resolve(account) == NotExecutable(message=NO_CLAIM_PLANS)


def test_replayed_claim_is_rejected_on_execution(
    resolver: ReadinessResolver,
    ledger: FakeLedger,
    account: str,
) -> None:
    ledger.create_plan(account, AIRDROP, account, interval=0)

    first = resolver.resolve(account)
    assert isinstance(first, Executable)
    ledger.execute(first.call)

    # The published document still lists the account; only execution can tell.
    second = resolver.resolve(account)
    assert isinstance(second, Executable)
    with pytest.raises(ClaimRejectedError, match="Nothing to claim"):
        ledger.execute(second.call)


def test_removing_one_of_several_plans_keeps_the_rest(
    resolver: ReadinessResolver,
    ledger: FakeLedger,
    account: str,
) -> None:
    first = ledger.create_plan(account, AIRDROP, account, interval=100)
    ledger.create_plan(account, AIRDROP, account, interval=100, initial_delay=10)

    ledger.remove_plan(account, first)

    assert resolver.resolve(account) == NotExecutable(message=NO_CLAIMS_EXECUTABLE)
