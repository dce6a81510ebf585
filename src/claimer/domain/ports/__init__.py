"""Domain port definitions for adapters."""

from __future__ import annotations

from .chain import ChainState
from .proofs import ProofProvider

__all__ = ["ChainState", "ProofProvider"]
