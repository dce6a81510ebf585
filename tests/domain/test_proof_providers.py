from __future__ import annotations

import pytest

from claimer.domain.model import ClaimProof
from claimer.domain.ports.proofs import ProofProvider
from claimer.domain.proof_providers import ProofProviderRegistry
from tests.support.ledger import address

SOURCE = address(0xA1)


def _none_provider(beneficiary: str, root: str) -> ClaimProof | None:  # noqa: ARG001
    return None


def _static_provider(beneficiary: str, root: str) -> ClaimProof | None:  # noqa: ARG001
    return ClaimProof(index=1, amount=2, proof=())


def test_lookup_ignores_address_case() -> None:
    registry = ProofProviderRegistry({SOURCE: _none_provider})

    assert registry.get(SOURCE.lower()) is _none_provider
    assert registry.get(SOURCE.upper().replace("0X", "0x")) is _none_provider
    assert SOURCE.lower() in registry


def test_unknown_source_returns_none() -> None:
    registry = ProofProviderRegistry()

    assert registry.get(SOURCE) is None
    assert SOURCE not in registry
    assert len(registry) == 0


def test_register_replaces_existing_provider() -> None:
    registry = ProofProviderRegistry({SOURCE: _none_provider})

    registry.register(SOURCE.lower(), _static_provider)

    assert len(registry) == 1
    assert registry.get(SOURCE) is _static_provider


def test_unregister_removes_provider() -> None:
    registry = ProofProviderRegistry({SOURCE: _none_provider})

    registry.unregister(SOURCE)
    registry.unregister(SOURCE)

    assert registry.get(SOURCE) is None


def test_blank_source_is_rejected() -> None:
    with pytest.raises(ValueError, match="must not be blank"):
        ProofProviderRegistry().register("  ", _none_provider)


def test_plain_functions_satisfy_provider_port() -> None:
    assert isinstance(_static_provider, ProofProvider)
    assert list(ProofProviderRegistry({SOURCE: _static_provider})) == [SOURCE.lower()]
