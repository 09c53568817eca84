"""Challenge document loading."""
from .load import load_share_set, parse_share
from .schema import ChallengeDocument, RawShare, Threshold, challenge_from_path

__all__ = [
    "ChallengeDocument",
    "RawShare",
    "Threshold",
    "challenge_from_path",
    "load_share_set",
    "parse_share",
]
