"""Value objects shared by the layout analyzer and its renderers."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Parameter(BaseModel):
    """One decoded argument of a resolved function signature."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: str
    value: Any = None


class Segment(BaseModel):
    """
    A contiguous range of the calldata tail, in hex-character offsets.

    `end` is exclusive. Pointer slots carry `is_offset` and the decoded byte
    offset in `offset_value`; payload regions of dynamic types carry
    `is_dynamic`.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    start: int
    end: int
    type: str
    name: str
    value: Any = None
    is_dynamic: bool = False
    is_offset: bool = False
    offset_value: Optional[int] = None

    @property
    def length(self) -> int:
        return self.end - self.start
