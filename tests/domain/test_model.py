from __future__ import annotations

from claimer.domain.model import (
    CallData,
    Executable,
    NotExecutable,
    Plan,
    outcome_to_payload,
)
from tests.support.ledger import address


def test_not_executable_payload() -> None:
    assert outcome_to_payload(NotExecutable(message="No claim plans")) == {
        "canExec": False,
        "message": "No claim plans",
    }


def test_executable_payload_has_single_call() -> None:
    outcome = Executable(call=CallData(to=address(0x01), data="0xabcdef"))

    assert outcome_to_payload(outcome) == {
        "canExec": True,
        "callData": [{"to": address(0x01), "data": "0xabcdef"}],
    }


def test_executable_payload_includes_value_when_set() -> None:
    outcome = Executable(call=CallData(to=address(0x01), data="0x", value=5))

    payload = outcome_to_payload(outcome)

    assert payload["callData"] == [{"to": address(0x01), "data": "0x", "value": "5"}]


def test_plan_due_boundary() -> None:
    plan = Plan(airdrop_source=address(1), beneficiary=address(2), interval=0, next_exec=10)

    assert not plan.is_due(9)
    assert plan.is_due(10)
    assert plan.is_due(11)
