"""Plan selection policies.

Only one plan is resolved per run, which bounds requests against proof sources
and the automation framework's per-run budget. Strict earliest-first selection
can starve later plans when a due plan keeps producing valid claims every run;
``RandomDuePolicy`` trades strict temporal ordering for fairness among due plans.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import PlanEntry


class SelectionPolicy(Protocol):
    """Pick the single plan the resolver should look at for ``now``.

    ``plans`` is never empty. The resolver still checks the returned plan for
    being due, so a policy may return a plan that is not.
    """

    def __call__(self, plans: Sequence[PlanEntry], now: int) -> PlanEntry: ...


class EarliestDuePolicy:
    """Minimum ``next_exec``; ties go to the first plan in enumeration order."""

    def __call__(self, plans: Sequence[PlanEntry], now: int) -> PlanEntry:  # noqa: ARG002
        selected = plans[0]
        for entry in plans[1:]:
            if entry.plan.next_exec < selected.plan.next_exec:
                selected = entry
        return selected


class RandomDuePolicy:
    """Uniform choice among due plans, falling back to the earliest plan."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()  # noqa: S311
        self._fallback = EarliestDuePolicy()

    def __call__(self, plans: Sequence[PlanEntry], now: int) -> PlanEntry:
        due = [entry for entry in plans if entry.plan.is_due(now)]
        if not due:
            return self._fallback(plans, now)
        return self._rng.choice(due)


SELECTION_POLICIES = ("earliest", "random")


def get_selection_policy(name: str, *, seed: int | None = None) -> SelectionPolicy:
    if name == "earliest":
        return EarliestDuePolicy()
    if name == "random":
        return RandomDuePolicy(random.Random(seed))  # noqa: S311
    raise ValueError(f"Unknown selection policy: {name}")


__all__ = [
    "SELECTION_POLICIES",
    "EarliestDuePolicy",
    "RandomDuePolicy",
    "SelectionPolicy",
    "get_selection_policy",
]
