"""Pydantic models describing published merkle claims documents.

The documents follow the Uniswap merkle-distributor layout: a ``claims`` mapping
keyed by account address, each entry carrying ``index``, ``amount`` and ``proof``.
Amounts are usually hex strings (``"0x0de0b6b3a7640000"``) but decimal strings and
plain integers are accepted too.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_BYTES32_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


def _parse_uint(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lower().startswith("0x"):
            return int(stripped, 16)
        return int(stripped, 10)
    return value


class MerkleBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class MerkleClaim(MerkleBaseModel):
    index: int = Field(ge=0)
    amount: int = Field(ge=0)
    proof: tuple[str, ...]

    @field_validator("index", "amount", mode="before")
    @classmethod
    def parse_uints(cls, value: object) -> object:
        return _parse_uint(value)

    @field_validator("proof")
    @classmethod
    def check_proof(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for item in value:
            if not _BYTES32_RE.match(item):
                raise ValueError(f"Proof element is not a 32-byte hex string: {item!r}")
        return tuple(item.lower() for item in value)


class MerkleClaimsDocument(MerkleBaseModel):
    merkle_root: str | None = Field(default=None, alias="merkleRoot")
    token_total: int | None = Field(default=None, alias="tokenTotal")
    claims: dict[str, MerkleClaim]

    @field_validator("token_total", mode="before")
    @classmethod
    def parse_token_total(cls, value: object) -> object:
        return _parse_uint(value)

    def claim_for(self, account: str) -> MerkleClaim | None:
        claim = self.claims.get(account)
        if claim is not None:
            return claim
        wanted = account.lower()
        for address, candidate in self.claims.items():
            if address.lower() == wanted:
                return candidate
        return None

