"""Logging setup for the resolver CLI."""

from __future__ import annotations

import logging

# Per-request chatter from the RPC and HTTP clients.
CHATTY_LOGGERS = ("httpx", "httpcore", "web3", "urllib3")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for resolver runs.

    The RPC and proof clients log every request; they are held at WARNING unless
    ``level`` asks for DEBUG output.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    client_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
