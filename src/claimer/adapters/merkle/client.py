"""HTTP client for root-addressed merkle claims documents."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from claimer.adapters.http_resilience import ResilientClient

from .schema import MerkleClaimsDocument

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from claimer.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class MerkleProofAPIError(RuntimeError):
    """Raised when a claims document is missing its expected structure."""


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def document_path(root: str, *, prefix: str = "") -> str:
    """Return the relative path of the document published for ``root``."""

    normalized = root.strip().lower()
    if not normalized.startswith("0x") or len(normalized) <= 2:  # noqa: PLR2004
        raise ValueError(f"Invalid merkle root: {root!r}")
    return f"{prefix}{normalized[2:]}.json"


class MerkleClaimsClient:
    """Low-level HTTP client fetching a claims document for a merkle root.

    Transport errors and non-2xx responses propagate as ``httpx`` exceptions so
    an unreachable proof source is never mistaken for an empty claim.
    """

    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        prefix: str = "",
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = resilience
        self._prefix = prefix
        self._client_factory = client_factory or _default_client_factory

    def fetch_document(self, root: str) -> MerkleClaimsDocument:
        return asyncio.run(self._fetch_document_async(root))

    async def _fetch_document_async(self, root: str) -> MerkleClaimsDocument:
        path = document_path(root, prefix=self._prefix)
        async with self._client_factory(self._resilience) as client:
            response = await client.get(path)
        return self._parse_response(response, path=path)

    def _parse_response(self, response: httpx.Response, *, path: str) -> MerkleClaimsDocument:
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise MerkleProofAPIError(f"Claims document {path} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise MerkleProofAPIError(f"Unexpected claims document payload at {path}")
        try:
            document = MerkleClaimsDocument.model_validate(payload)
        except ValidationError as exc:
            raise MerkleProofAPIError(f"Malformed claims document at {path}: {exc}") from exc
        log.debug("Fetched claims document %s with %s claims", path, len(document.claims))
        return document
