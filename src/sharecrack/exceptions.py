"""Central exception hierarchy."""
from __future__ import annotations

from enum import Enum


class SharecrackError(Exception):
    """Base exception for all failures"""


class ConfigError(SharecrackError):
    """Raised when a configuration file cannot be parsed or validated"""


class DecodeFailure(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_CHARACTER = "invalid_character"
    DIGIT_OUT_OF_RANGE = "digit_out_of_range"
    INVALID_BASE = "invalid_base"


class DecodeError(SharecrackError, ValueError):
    """Raised when an encoded share value cannot be decoded in its base"""

    def __init__(
        self,
        reason: DecodeFailure,
        message: str,
        *,
        symbol: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.symbol = symbol
        self.position = position


class ShareLoadError(SharecrackError):
    """Raised in strict mode when a single share of a challenge is unusable"""

    def __init__(self, share_id: str, message: str) -> None:
        super().__init__(f"share {share_id!r}: {message}")
        self.share_id = share_id


class InterpolationFailure(str, Enum):
    INSUFFICIENT_POINTS = "insufficient_points"
    DUPLICATE_ABSCISSA = "duplicate_abscissa"
    NON_INTEGRAL = "non_integral"


class InterpolationError(SharecrackError):
    """Raised when a set of points cannot be interpolated to an integer secret"""

    def __init__(self, reason: InterpolationFailure, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class NonIntegralSecretError(InterpolationError):
    """The constant term of the interpolated polynomial is not an integer"""

    def __init__(self, value: object) -> None:
        super().__init__(
            InterpolationFailure.NON_INTEGRAL,
            f"Interpolated constant term {value} is not an integer",
        )
        self.value = value


class ReconstructionFailure(str, Enum):
    NO_CONSENSUS = "no_consensus"


class ReconstructionError(SharecrackError):
    """Raised when no threshold subset produced a secret"""

    def __init__(self, message: str = "No subset of shares could be interpolated") -> None:
        super().__init__(message)
        self.reason = ReconstructionFailure.NO_CONSENSUS


__all__ = [
    "ConfigError",
    "DecodeError",
    "DecodeFailure",
    "InterpolationError",
    "InterpolationFailure",
    "NonIntegralSecretError",
    "ReconstructionError",
    "ReconstructionFailure",
    "ShareLoadError",
    "SharecrackError",
]
