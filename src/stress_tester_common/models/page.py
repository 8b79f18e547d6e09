"""Page model: a 1-based position within a fixed-size sequence."""

from __future__ import annotations

from pydantic import StrictInt, model_validator

from stress_tester_common.models.base import WireModel


class Page(WireModel):
    """Page ``number`` of ``count``."""

    number: StrictInt
    count: StrictInt

    @model_validator(mode="after")
    def _check_bounds(self) -> Page:
        if not 1 <= self.number <= self.count:
            msg = f"page number {self.number} is outside 1..{self.count}"
            raise ValueError(msg)
        return self

    @classmethod
    def of(cls, number: int, count: int) -> Page:
        """Build page ``number`` of ``count``."""
        return cls(number=number, count=count)

    @property
    def is_first(self) -> bool:
        """Whether this is the first page."""
        return self.number == 1

    @property
    def index(self) -> int:
        """Zero-based index of this page."""
        return self.number - 1
