"""Registry mapping airdrop distributors to proof providers.

Support for a new airdrop is added by registering a provider for its
distributor address; the resolver only ever looks providers up here.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from claimer.domain.ports.proofs import ProofProvider

log = getLogger(__name__)


def _normalize_source(source: str) -> str:
    return source.strip().lower()


class ProofProviderRegistry:
    """Keyed lookup of proof providers, case-insensitive on the source address."""

    def __init__(self, providers: Mapping[str, ProofProvider] | None = None) -> None:
        self._providers: dict[str, ProofProvider] = {}
        for source, provider in (providers or {}).items():
            self.register(source, provider)

    def register(self, source: str, provider: ProofProvider) -> None:
        key = _normalize_source(source)
        if not key:
            raise ValueError("Airdrop source identifier must not be blank")
        if key in self._providers:
            log.debug("Replacing proof provider for %s", source)
        self._providers[key] = provider

    def unregister(self, source: str) -> None:
        self._providers.pop(_normalize_source(source), None)

    def get(self, source: str) -> ProofProvider | None:
        return self._providers.get(_normalize_source(source))

    def sources(self) -> tuple[str, ...]:
        return tuple(self._providers)

    def __contains__(self, source: object) -> bool:
        return isinstance(source, str) and _normalize_source(source) in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)


__all__ = ["ProofProviderRegistry"]
