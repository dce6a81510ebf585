# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from claimer.app import list_claim_plans, on_run
from claimer.config import configure_logging
from claimer.domain.selection import SELECTION_POLICIES, get_selection_policy
from claimer.domain.transactions import verify_user_args

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve recurring airdrop claims")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve the next executable claim")
    resolve.add_argument(
        "--contract-address",
        type=str,
        required=True,
        help="Address of the account contract holding the claim plans",
    )
    resolve.add_argument(
        "--policy",
        choices=SELECTION_POLICIES,
        default="earliest",
        help="Plan selection policy (default: %(default)s)",
    )
    resolve.add_argument(
        "--seed",
        type=int,
        help="Seed for the random selection policy",
    )

    plans = subparsers.add_parser("plans", help="List claim plans for an account")
    plans.add_argument(
        "--contract-address",
        type=str,
        required=True,
        help="Address of the account contract holding the claim plans",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        user_args = verify_user_args({"contractAddress": parsed_args.contract_address})
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "resolve":
            policy = get_selection_policy(parsed_args.policy, seed=parsed_args.seed)
            payload = on_run({"contractAddress": user_args.contract_address}, policy=policy)
            print(json.dumps(payload, indent=2))
        elif parsed_args.command == "plans":
            statuses = list_claim_plans(user_args.contract_address)
            print(json.dumps([status.to_payload() for status in statuses], indent=2))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during resolution")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
