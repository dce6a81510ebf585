"""Invocation argument validation and claim calldata encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError
from web3 import Web3

from .model import CallData, ClaimProof

if TYPE_CHECKING:
    from collections.abc import Mapping

CLAIM_SIGNATURE: Final[str] = "claim(bytes32,uint256,uint256,bytes32[])"
CLAIM_ARG_TYPES: Final[tuple[str, ...]] = ("bytes32", "uint256", "uint256", "bytes32[]")
CLAIM_SELECTOR: Final[bytes] = bytes(Web3.keccak(text=CLAIM_SIGNATURE)[:4])


class InvalidUserArgsError(ValueError):
    """Raised when the automation framework passes unusable invocation arguments."""


class TransactionEncodingError(ValueError):
    """Raised when a claim call cannot be encoded for the given target/arguments."""


@dataclass(frozen=True, slots=True)
class UserArgs:
    contract_address: str


@dataclass(frozen=True, slots=True)
class DecodedClaim:
    key: str
    index: int
    amount: int
    proof: tuple[str, ...]


def verify_user_args(args: Mapping[str, object]) -> UserArgs:
    """Validate invocation arguments, returning the checksummed account address."""

    contract_address = args.get("contractAddress")
    if not isinstance(contract_address, str) or not Web3.is_address(contract_address):
        raise InvalidUserArgsError("verifyUserArgs: invalid contract address")
    return UserArgs(contract_address=Web3.to_checksum_address(contract_address))


def _bytes32(value: str, *, field: str) -> bytes:
    try:
        raw = Web3.to_bytes(hexstr=value)
    except (TypeError, ValueError) as exc:
        raise TransactionEncodingError(f"Invalid {field}: {value!r}") from exc
    if len(raw) != 32:  # noqa: PLR2004
        raise TransactionEncodingError(f"Invalid {field}: expected 32 bytes, got {len(raw)}")
    return raw


def build_claim_call(registry: str, key: str, proof: ClaimProof) -> CallData:
    """Encode ``claim(key, index, amount, proof)`` against the plan registry."""

    if not registry or not Web3.is_address(registry):
        raise TransactionEncodingError(f"Invalid claim target: {registry!r}")
    if proof.index < 0 or proof.amount < 0:
        raise TransactionEncodingError("Claim index and amount must be non-negative")

    key_bytes = _bytes32(key, field="plan key")
    proof_items = [_bytes32(item, field="proof element") for item in proof.proof]
    try:
        encoded = encode(
            list(CLAIM_ARG_TYPES),
            [key_bytes, proof.index, proof.amount, proof_items],
        )
    except EncodingError as exc:
        raise TransactionEncodingError(f"Unable to encode claim for {key}: {exc}") from exc

    return CallData(
        to=Web3.to_checksum_address(registry),
        data=Web3.to_hex(CLAIM_SELECTOR + encoded),
    )


def decode_claim_call(data: str) -> DecodedClaim:
    """Decode calldata produced by :func:`build_claim_call`."""

    raw = Web3.to_bytes(hexstr=data)
    if raw[:4] != CLAIM_SELECTOR:
        raise ValueError("Calldata does not target claim(bytes32,uint256,uint256,bytes32[])")
    try:
        key, index, amount, proof = decode(list(CLAIM_ARG_TYPES), raw[4:])
    except DecodingError as exc:
        raise ValueError(f"Malformed claim calldata: {exc}") from exc
    return DecodedClaim(
        key=Web3.to_hex(key),
        index=index,
        amount=amount,
        proof=tuple(Web3.to_hex(item) for item in proof),
    )


__all__ = [
    "CLAIM_SELECTOR",
    "CLAIM_SIGNATURE",
    "DecodedClaim",
    "InvalidUserArgsError",
    "TransactionEncodingError",
    "UserArgs",
    "build_claim_call",
    "decode_claim_call",
    "verify_user_args",
]
