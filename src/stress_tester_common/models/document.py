"""Tracked document models — the file a request operates on."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, StrictStr

from stress_tester_common.models.base import WireModel


class RewriteMode(StrEnum):
    """Enumerate how a tracked document is progressively rewritten."""

    # Do not rewrite the file, only issue non-modifying requests
    NONE = "none"
    # Token by token, top to bottom
    BASIC = "basic"
    # All top level declarations top to bottom, concurrently
    CONCURRENT = "concurrent"
    # From the most deeply nested tokens to the least
    INSIDE_OUT = "insideOut"


class DocumentModification(WireModel):
    """A pending rewrite applied to a document."""

    mode: RewriteMode
    content: StrictStr


class DocumentInfo(WireModel):
    """A tracked document, optionally carrying its modified content."""

    path: StrictStr = Field(min_length=1)
    modification: DocumentModification | None = None

    @property
    def content(self) -> str | None:
        """Return the modified content, or None when the document is unmodified."""
        if self.modification is None:
            return None
        return self.modification.content
