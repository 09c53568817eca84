"""Consensus cracker exports."""
from .combinations import SubsetEnumerator
from .cracker import Candidate, ConsensusCracker, crack

__all__ = ["Candidate", "ConsensusCracker", "SubsetEnumerator", "crack"]
