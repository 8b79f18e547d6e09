"""Request models — one editor-like operation issued against a document.

Each variant carries its wire tag in the ``request`` field. The tag for
``EditorReplaceText`` is ``"replaceText"``, not the class name.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, StrictInt, StrictStr, model_validator

from stress_tester_common.models.base import WireModel
from stress_tester_common.models.document import DocumentInfo

Offset = Annotated[StrictInt, Field(ge=0)]
Length = Annotated[StrictInt, Field(ge=0)]


def _check_span(document: DocumentInfo, offset: int, length: int = 0) -> None:
    """Reject spans that fall past the end of the document's modified content."""
    content = document.content
    if content is None:
        return
    size = len(content.encode("utf-8"))
    if offset + length > size:
        msg = (
            f"span offset={offset} length={length} exceeds "
            f"{size} bytes of content in {document.path}"
        )
        raise ValueError(msg)


class EditorOpen(WireModel):
    """Open a document in the editor."""

    request: Literal["editorOpen"] = "editorOpen"
    document: DocumentInfo


class EditorClose(WireModel):
    """Close a document in the editor."""

    request: Literal["editorClose"] = "editorClose"
    document: DocumentInfo


class EditorReplaceText(WireModel):
    """Replace ``length`` bytes at ``offset`` with ``text``."""

    request: Literal["replaceText"] = "replaceText"
    document: DocumentInfo
    offset: Offset
    length: Length
    text: StrictStr

    @model_validator(mode="after")
    def _validate_span(self) -> EditorReplaceText:
        _check_span(self.document, self.offset, self.length)
        return self


class CursorInfo(WireModel):
    """Query symbol information at a cursor position."""

    request: Literal["cursorInfo"] = "cursorInfo"
    document: DocumentInfo
    offset: Offset
    args: list[StrictStr]

    @model_validator(mode="after")
    def _validate_span(self) -> CursorInfo:
        _check_span(self.document, self.offset)
        return self


class CodeComplete(WireModel):
    """Request completions at a cursor position."""

    request: Literal["codeComplete"] = "codeComplete"
    document: DocumentInfo
    offset: Offset
    args: list[StrictStr]

    @model_validator(mode="after")
    def _validate_span(self) -> CodeComplete:
        _check_span(self.document, self.offset)
        return self


class RangeInfo(WireModel):
    """Query information about the byte range ``[offset, offset + length)``."""

    request: Literal["rangeInfo"] = "rangeInfo"
    document: DocumentInfo
    offset: Offset
    length: Length
    args: list[StrictStr]

    @model_validator(mode="after")
    def _validate_span(self) -> RangeInfo:
        _check_span(self.document, self.offset, self.length)
        return self


class SemanticRefactoring(WireModel):
    """Apply the refactoring ``kind`` at a cursor position."""

    request: Literal["semanticRefactoring"] = "semanticRefactoring"
    document: DocumentInfo
    offset: Offset
    kind: StrictStr
    args: list[StrictStr]

    @model_validator(mode="after")
    def _validate_span(self) -> SemanticRefactoring:
        _check_span(self.document, self.offset)
        return self


RequestInfo = Annotated[
    EditorOpen
    | EditorClose
    | EditorReplaceText
    | CursorInfo
    | CodeComplete
    | RangeInfo
    | SemanticRefactoring,
    Field(discriminator="request"),
]
