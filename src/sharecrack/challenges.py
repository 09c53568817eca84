"""Built-in demonstration challenges."""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .loader.schema import ChallengeDocument

# (share id, base, encoded value)
_TESTCASE_1: Sequence[Tuple[str, str, str]] = (
    ("1", "10", "4"),
    ("2", "2", "111"),
    ("3", "10", "12"),
    ("6", "4", "213"),
)

_TESTCASE_2: Sequence[Tuple[str, str, str]] = (
    ("1", "6", "13444211440455345511"),
    ("2", "15", "aed7015a346d635"),
    ("3", "15", "6aeeb69631c227c"),
    ("4", "16", "e1b5e05623d881f"),
    ("5", "8", "316034514573652620673"),
    ("6", "3", "2122212201122002221120200210011020220200"),
    ("7", "3", "20120221122211000100210021102001201112121"),
    ("8", "6", "20220554335330240002224253"),
    ("9", "12", "45153788322a1255483"),
    ("10", "7", "1101613130313526312514143"),
)


def _build(n: int, k: int, rows: Sequence[Tuple[str, str, str]]) -> ChallengeDocument:
    payload: Dict[str, object] = {"keys": {"n": n, "k": k}}
    for share_id, base, value in rows:
        payload[share_id] = {"base": base, "value": value}
    return ChallengeDocument.model_validate(payload)


def build_testcase_1() -> ChallengeDocument:
    return _build(4, 3, _TESTCASE_1)


def build_testcase_2() -> ChallengeDocument:
    return _build(10, 7, _TESTCASE_2)


BUILTIN = {
    "testcase-1": build_testcase_1,
    "testcase-2": build_testcase_2,
}

__all__ = ["BUILTIN", "build_testcase_1", "build_testcase_2"]
