"""Majority-vote secret recovery across all threshold subsets."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import structlog

from ..config import ConsensusConfig, TieBreak
from ..exceptions import InterpolationError
from ..interpolation import interpolate
from ..models import CrackDiagnostics, CrackingResult, Share, ShareSet
from .combinations import SubsetEnumerator

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class Candidate:
    """A secret value together with every subset that produced it."""

    secret: int
    subsets: List[Tuple[int, ...]] = field(default_factory=list)

    @property
    def votes(self) -> int:
        return len(self.subsets)

    def share_ids(self) -> Set[int]:
        members: Set[int] = set()
        for subset in self.subsets:
            members.update(subset)
        return members


class ConsensusCracker:
    """Recover the secret trusted by the largest number of threshold subsets.

    Every ``k``-sized subset of the share set is interpolated on its own.
    Subsets that cannot be interpolated to an integer are discarded; the
    rest vote for the secret they produce. Shares that appear in no subset
    voting for the winning secret are reported as faulty. This only finds
    the true secret while genuine-only subsets still form a plurality.
    """

    def __init__(self, config: ConsensusConfig | None = None) -> None:
        self.config = config or ConsensusConfig()

    def crack(self, share_set: ShareSet) -> CrackingResult:
        log = logger.bind(shares=len(share_set), k=share_set.k, declared_n=share_set.n)
        if not share_set.reconstructable:
            log.warning("too few shares to attempt reconstruction")
            return CrackingResult(secret=None)

        subsets = SubsetEnumerator(share_set.shares, share_set.k)
        candidates, successful = self._tally(subsets, log)
        total = len(subsets)

        winner, tied = self._select(candidates)
        if winner is None:
            log.warning("no subset could be interpolated", total_subsets=total)
            return CrackingResult(
                secret=None,
                diagnostics=CrackDiagnostics(total_subsets=total),
            )

        trusted = winner.share_ids()
        faulty = frozenset(x for x in share_set.ids if x not in trusted)
        if tied:
            log.warning(
                "tie between candidate secrets",
                votes=winner.votes,
                policy=self.config.tie_break.value,
            )
        log.info(
            "consensus reached",
            total_subsets=total,
            successful_subsets=successful,
            consensus_count=winner.votes,
            faulty=sorted(faulty),
        )
        return CrackingResult(
            secret=winner.secret,
            faulty_share_ids=faulty,
            confidence=winner.votes / successful,
            diagnostics=CrackDiagnostics(
                total_subsets=total,
                successful_subsets=successful,
                consensus_count=winner.votes,
                tied=tied,
            ),
        )

    def _tally(
        self, subsets: SubsetEnumerator[Share], log: structlog.BoundLoggerBase
    ) -> Tuple[Dict[int, Candidate], int]:
        # insertion order of ``candidates`` is first-seen enumeration order
        candidates: Dict[int, Candidate] = {}
        successful = 0
        for subset in subsets:
            ids = tuple(share.x for share in subset)
            try:
                secret = interpolate([share.point for share in subset])
            except InterpolationError as exc:
                log.debug("subset discarded", subset=list(ids), reason=exc.reason.value)
                continue
            successful += 1
            candidate = candidates.get(secret)
            if candidate is None:
                candidate = candidates[secret] = Candidate(secret)
            candidate.subsets.append(ids)
        return candidates, successful

    def _select(self, candidates: Dict[int, Candidate]) -> Tuple[Optional[Candidate], bool]:
        if not candidates:
            return None, False
        top = max(candidate.votes for candidate in candidates.values())
        leaders = [candidate for candidate in candidates.values() if candidate.votes == top]
        if self.config.tie_break is TieBreak.SMALLEST:
            winner = min(leaders, key=lambda candidate: candidate.secret)
        else:
            winner = leaders[0]
        return winner, len(leaders) > 1


def crack(
    share_set: ShareSet,
    *,
    cracker: ConsensusCracker | None = None,
    config: ConsensusConfig | None = None,
) -> CrackingResult:
    """Run one consensus pass; ``config`` applies to this call only."""
    if config is not None:
        runner = ConsensusCracker(config=config)
    else:
        runner = cracker or ConsensusCracker()
    return runner.crack(share_set)


__all__ = ["Candidate", "ConsensusCracker", "crack"]
