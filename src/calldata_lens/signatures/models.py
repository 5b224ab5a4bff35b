"""Signature directory and history records."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class SignatureCandidate(BaseModel):
    """One text signature the directory knows for a selector."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[int] = None
    text_signature: str
    hex_signature: str = ""
    created_at: Optional[str] = None


class SignatureSelection(BaseModel):
    """A signature the user confirmed for a selector."""
    model_config = ConfigDict(extra="forbid")

    hex_signature: str
    selected_signature: str
    last_used: float


class SignatureResolution(BaseModel):
    model_config = ConfigDict(frozen=True)

    best_signature: str
    index: int
    score: Optional[float] = None
    reason: Literal["single", "history", "score"]
