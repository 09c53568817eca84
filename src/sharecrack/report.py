"""Rendering of cracking results for people and machines."""
from __future__ import annotations

from typing import Any, Dict, List

from .models import CrackingResult


def format_secret(result: CrackingResult) -> str:
    return "None" if result.secret is None else str(result.secret)


def format_faulty(result: CrackingResult) -> str:
    if not result.faulty_share_ids:
        return "None"
    return ", ".join(str(x) for x in sorted(result.faulty_share_ids))


def render_text(label: str, result: CrackingResult) -> List[str]:
    prefix = f"{label} " if label else ""
    return [
        f"{prefix}Secret: {format_secret(result)}",
        f"{prefix}Wrong Points: {format_faulty(result)}",
    ]


def result_to_dict(result: CrackingResult) -> Dict[str, Any]:
    # secrets can exceed the range JSON consumers parse exactly
    diagnostics = result.diagnostics
    return {
        "secret": None if result.secret is None else str(result.secret),
        "faulty_share_ids": sorted(result.faulty_share_ids),
        "confidence": result.confidence,
        "diagnostics": {
            "total_subsets": diagnostics.total_subsets,
            "successful_subsets": diagnostics.successful_subsets,
            "consensus_count": diagnostics.consensus_count,
            "tied": diagnostics.tied,
        },
    }


__all__ = ["format_faulty", "format_secret", "render_text", "result_to_dict"]
