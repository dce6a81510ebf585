"""``ChainState`` adapter reading the Claimer and airdrop contracts over JSON-RPC."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

from web3 import Web3

from claimer.domain.model import Plan, PlanEntry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from web3.contract import Contract

    from claimer.config.chain import ChainConfig

log = getLogger(__name__)

CLAIMER_ABI: Final[list[dict[str, Any]]] = [
    {
        "inputs": [],
        "name": "getPlans",
        "outputs": [
            {
                "components": [
                    {"internalType": "bytes32", "name": "key", "type": "bytes32"},
                    {
                        "components": [
                            {"internalType": "address", "name": "airdrop", "type": "address"},
                            {"internalType": "address", "name": "beneficiary", "type": "address"},
                            {"internalType": "uint256", "name": "interval", "type": "uint256"},
                            {"internalType": "uint256", "name": "nextExec", "type": "uint256"},
                        ],
                        "internalType": "struct Claimer.Plan",
                        "name": "value",
                        "type": "tuple",
                    },
                ],
                "internalType": "struct Claimer.PlanEntry[]",
                "name": "",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "dedicatedMsgSender",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

AIRDROP_DISTRIBUTOR_ABI: Final[list[dict[str, Any]]] = [
    {
        "inputs": [],
        "name": "merkleRoot",
        "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
        "stateMutability": "view",
        "type": "function",
    },
]


def _to_hex(value: bytes | str) -> str:
    if isinstance(value, str):
        return value.lower()
    return Web3.to_hex(value)


def plan_entry_from_raw(raw: Sequence[Any]) -> PlanEntry:
    """Convert one decoded ``getPlans`` element into a :class:`PlanEntry`."""

    key, value = raw[0], raw[1]
    airdrop, beneficiary, interval, next_exec = value[0], value[1], value[2], value[3]
    return PlanEntry(
        key=_to_hex(key),
        plan=Plan(
            airdrop_source=Web3.to_checksum_address(airdrop),
            beneficiary=Web3.to_checksum_address(beneficiary),
            interval=int(interval),
            next_exec=int(next_exec),
        ),
    )


@dataclass(slots=True)
class Web3ChainState:
    web3: Web3

    @classmethod
    def from_config(cls, config: ChainConfig) -> Web3ChainState:
        provider = Web3.HTTPProvider(
            config.rpc_url,
            request_kwargs={"timeout": config.timeout_seconds},
        )
        return cls(web3=Web3(provider))

    def latest_timestamp(self) -> int:
        block = self.web3.eth.get_block("latest")
        return int(block["timestamp"])

    def get_plans(self, account: str) -> list[PlanEntry]:
        raw_plans = self._claimer(account).functions.getPlans().call()
        plans = [plan_entry_from_raw(item) for item in raw_plans]
        log.debug("Read %s plans for %s", len(plans), account)
        return plans

    def merkle_root(self, airdrop_source: str) -> str:
        contract = self.web3.eth.contract(
            address=Web3.to_checksum_address(airdrop_source),
            abi=AIRDROP_DISTRIBUTOR_ABI,
        )
        return _to_hex(contract.functions.merkleRoot().call())

    def dedicated_msg_sender(self, account: str) -> str:
        sender = self._claimer(account).functions.dedicatedMsgSender().call()
        return Web3.to_checksum_address(sender)

    def _claimer(self, account: str) -> Contract:
        return self.web3.eth.contract(address=Web3.to_checksum_address(account), abi=CLAIMER_ABI)
