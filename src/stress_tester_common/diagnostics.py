"""Annotate a request's document content at the byte positions it references."""

from __future__ import annotations

from stress_tester_common.models import (
    CodeComplete,
    CursorInfo,
    EditorClose,
    EditorOpen,
    EditorReplaceText,
    RangeInfo,
    RequestInfo,
    SemanticRefactoring,
)

CURSOR_MARKER = "<cursor-offset>"
COMPLETE_MARKER = "<complete-offset>"
REFACTOR_MARKER = "<refactor-offset>"
REPLACE_START_MARKER = "<replace-start>"
REPLACE_END_MARKER = "<replace-end>"
RANGE_START_MARKER = "<range-start>"
RANGE_END_MARKER = "<range-end>"
UNMODIFIED_PLACEHOLDER = "<unmodified>"

_POINT_MARKERS: dict[type, str] = {
    CursorInfo: CURSOR_MARKER,
    CodeComplete: COMPLETE_MARKER,
    SemanticRefactoring: REFACTOR_MARKER,
}
_SPAN_MARKERS: dict[type, tuple[str, str]] = {
    EditorReplaceText: (REPLACE_START_MARKER, REPLACE_END_MARKER),
    RangeInfo: (RANGE_START_MARKER, RANGE_END_MARKER),
}


def _insert_markers(content: str, positions: list[tuple[int, str]]) -> str:
    """Insert markers at UTF-8 byte offsets of ``content``.

    ``positions`` must be sorted by offset. Parts are joined as bytes and
    decoded once, so an offset inside a multi-byte character degrades to
    replacement characters rather than raising.
    """
    source = content.encode("utf-8")
    parts: list[bytes] = []
    start = 0
    for offset, marker in positions:
        parts.append(source[start:offset])
        parts.append(marker.encode("utf-8"))
        start = offset
    parts.append(source[start:])
    return b"".join(parts).decode("utf-8", errors="replace")


def mark_source_location(request: RequestInfo) -> str | None:
    """Return the request's document content with its location marked.

    Returns None when the document carries no modification.
    """
    content = request.document.content
    if content is None:
        return None
    if isinstance(request, EditorOpen | EditorClose):
        return content
    point_marker = _POINT_MARKERS.get(type(request))
    if point_marker is not None:
        return _insert_markers(content, [(request.offset, point_marker)])
    start_marker, end_marker = _SPAN_MARKERS[type(request)]
    return _insert_markers(
        content,
        [
            (request.offset, start_marker),
            (request.offset + request.length, end_marker),
        ],
    )


def render_source_location(request: RequestInfo) -> str:
    """Like :func:`mark_source_location`, with a placeholder for unmodified documents."""
    marked = mark_source_location(request)
    if marked is None:
        return UNMODIFIED_PLACEHOLDER
    return marked
