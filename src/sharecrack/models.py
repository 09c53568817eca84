"""Shared domain models for share sets and cracking results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Optional, Tuple

from .exceptions import ReconstructionError


@dataclass(frozen=True, slots=True)
class Share:
    """One decoded (x, y) point of the scheme."""

    x: int
    y: int
    base: int = 10
    raw_value: str = ""

    def __post_init__(self) -> None:
        if self.x <= 0:
            raise ValueError(f"Share id must be a positive integer, got {self.x}")
        if not 2 <= self.base <= 36:
            raise ValueError(f"Share base must be within [2, 36], got {self.base}")

    @property
    def point(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"Share[x={self.x}, y={self.y}]"


@dataclass(frozen=True, slots=True)
class ShareSet:
    """All decoded shares of one problem instance plus its threshold.

    ``n`` is the declared share count and is informational only; the number
    of usable shares is ``len(shares)``.
    """

    shares: Tuple[Share, ...]
    k: int
    n: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "shares", tuple(self.shares))
        if self.k < 2:
            raise ValueError(f"Threshold k must be at least 2, got {self.k}")
        seen: set[int] = set()
        for share in self.shares:
            if share.x in seen:
                raise ValueError(f"Duplicate share id: {share.x}")
            seen.add(share.x)

    def __len__(self) -> int:
        return len(self.shares)

    def __iter__(self) -> Iterator[Share]:
        return iter(self.shares)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(share.x for share in self.shares)

    @property
    def reconstructable(self) -> bool:
        return len(self.shares) >= self.k


@dataclass(frozen=True, slots=True)
class CrackDiagnostics:
    total_subsets: int = 0
    successful_subsets: int = 0
    consensus_count: int = 0
    tied: bool = False


@dataclass(frozen=True, slots=True)
class CrackingResult:
    """Outcome of one consensus run over a share set."""

    secret: Optional[int]
    faulty_share_ids: FrozenSet[int] = field(default_factory=frozenset)
    confidence: float = 0.0
    diagnostics: CrackDiagnostics = field(default_factory=CrackDiagnostics)

    @property
    def solved(self) -> bool:
        return self.secret is not None

    def is_faulty(self, share_id: int) -> bool:
        return share_id in self.faulty_share_ids

    def require_secret(self) -> int:
        if self.secret is None:
            raise ReconstructionError()
        return self.secret


__all__ = ["CrackDiagnostics", "CrackingResult", "Share", "ShareSet"]
