"""Threshold secret recovery with consensus-based fault detection."""
from .consensus import ConsensusCracker, crack
from .decoding import decode, encode
from .exceptions import (
    DecodeError,
    InterpolationError,
    ReconstructionError,
    SharecrackError,
)
from .interpolation import interpolate
from .models import CrackDiagnostics, CrackingResult, Share, ShareSet
from .version import __version__

__all__ = [
    "ConsensusCracker",
    "CrackDiagnostics",
    "CrackingResult",
    "DecodeError",
    "InterpolationError",
    "ReconstructionError",
    "Share",
    "ShareSet",
    "SharecrackError",
    "crack",
    "decode",
    "encode",
    "interpolate",
    "__version__",
]
