"""Turn a validated challenge document into a decoded share set."""
from __future__ import annotations

from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from ..decoding import decode
from ..exceptions import DecodeError, ShareLoadError
from ..models import Share, ShareSet
from .schema import ChallengeDocument, RawShare

logger = structlog.get_logger(__name__)


def parse_share(share_id: str, entry: Any) -> Share:
    """Validate and decode one raw share, raising :class:`ShareLoadError` when unusable."""

    try:
        raw = entry if isinstance(entry, RawShare) else RawShare.model_validate(entry)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) if err["loc"] else "share" for err in exc.errors())
        raise ShareLoadError(share_id, f"malformed share ({fields})") from None
    try:
        x = int(share_id.strip())
    except ValueError:
        raise ShareLoadError(share_id, "share id is not an integer") from None
    if x <= 0:
        raise ShareLoadError(share_id, "share id must be positive")
    try:
        base = int(raw.base.strip())
    except ValueError:
        raise ShareLoadError(share_id, f"base {raw.base!r} is not an integer") from None
    try:
        y = decode(raw.value, base)
    except DecodeError as exc:
        raise ShareLoadError(share_id, str(exc)) from exc
    return Share(x=x, y=y, base=base, raw_value=raw.value)


def load_share_set(document: ChallengeDocument, *, strict: bool = False) -> ShareSet:
    """Decode every share of ``document``.

    Unusable shares are dropped from the set with a warning, so they are
    neither used nor reported as faulty. With ``strict`` the first unusable
    share aborts loading instead.
    """

    shares: List[Share] = []
    seen: Dict[int, str] = {}
    for share_id, raw in document.shares.items():
        try:
            share = parse_share(share_id, raw)
            if share.x in seen:
                raise ShareLoadError(share_id, f"duplicates share {seen[share.x]!r}")
        except ShareLoadError as exc:
            if strict:
                raise
            logger.warning("share dropped", share=share_id, error=str(exc))
            continue
        seen[share.x] = share_id
        shares.append(share)
    return ShareSet(shares=tuple(shares), k=document.keys.k, n=document.keys.n)


__all__ = ["load_share_set", "parse_share"]
