"""Challenge document schemas."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

THRESHOLD_KEY = "keys"


class Threshold(BaseModel):
    n: Optional[int] = Field(default=None, ge=0, description="Declared share count")
    k: int = Field(..., ge=2, description="Shares required to reconstruct")


class RawShare(BaseModel):
    base: str
    value: str

    @field_validator("base", "value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # JSON integers; YAML documents are read with every scalar as text
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ChallengeDocument(BaseModel):
    """A threshold configuration plus encoded shares keyed by share id.

    The serialized form keeps the threshold under ``keys`` and every other
    top-level entry is a share::

        {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}}
    """

    keys: Threshold
    # validated one at a time by the loader so a malformed share can be dropped
    shares: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _split_shares(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "shares" in data:
            return data
        shares = {str(key): value for key, value in data.items() if key != THRESHOLD_KEY}
        return {THRESHOLD_KEY: data.get(THRESHOLD_KEY), "shares": shares}

    def to_mapping(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {THRESHOLD_KEY: self.keys.model_dump(exclude_none=True)}
        for share_id, share in self.shares.items():
            payload[share_id] = share
        return payload


def challenge_from_path(path: Path) -> ChallengeDocument:
    import json

    import yaml

    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() in {".yaml", ".yml"}:
            # BaseLoader keeps "0101" as text instead of an octal int
            raw = yaml.load(handle, Loader=yaml.BaseLoader)
        else:
            raw = json.load(handle)
    return ChallengeDocument.model_validate(raw)


__all__ = ["ChallengeDocument", "RawShare", "THRESHOLD_KEY", "Threshold", "challenge_from_path"]
