"""Human-readable reports for detected SourceKit failures."""

from __future__ import annotations

from stress_tester_common.diagnostics import render_source_location
from stress_tester_common.models import (
    CodeComplete,
    CursorInfo,
    DocumentInfo,
    EditorClose,
    EditorOpen,
    EditorReplaceText,
    RangeInfo,
    RequestInfo,
    SemanticRefactoring,
    SourceKitCrashed,
    SourceKitError,
    SourceKitErrorReason,
    SourceKitFailed,
    SourceKitTimedOut,
    StressTesterMessage,
)

CRASHED_HEADLINE = "SourceKit crashed"
TIMED_OUT_HEADLINE = "Timed out waiting for SourceKit response"
REASON_HEADLINES: dict[SourceKitErrorReason, str] = {
    SourceKitErrorReason.ERROR_RESPONSE: "SourceKit returned an error response",
    SourceKitErrorReason.ERROR_TYPE_IN_RESPONSE: (
        "SourceKit returned a response containing <<error type>>"
    ),
    SourceKitErrorReason.ERROR_DESERIALIZING_SYNTAX_TREE: (
        "SourceKit returned a response with invalid SyntaxTree data"
    ),
    SourceKitErrorReason.SOURCE_AND_SYNTAX_TREE_MISMATCH: (
        "SourceKit returned a syntax tree that doesn't match the expected source"
    ),
}
BEGIN_CONTENT_LINE = "-- begin file content --------"
END_CONTENT_LINE = "-- end file content ----------"
DETECTED_PREFIX = "Failure detected: "


def describe_document(document: DocumentInfo) -> str:
    """Return the document path, noting its rewrite mode when modified."""
    if document.modification is None:
        return document.path
    return f"{document.path} (modified: {document.modification.mode.value})"


def describe_request(request: RequestInfo) -> str:  # noqa: PLR0911
    """Return the one-line description of a request."""
    document = describe_document(request.document)
    if isinstance(request, EditorOpen):
        return f"EditorOpen on {document}"
    if isinstance(request, EditorClose):
        return f"EditorClose on {document}"
    if isinstance(request, CursorInfo):
        return (
            f"CursorInfo in {document} at offset {request.offset} "
            f"with args: {' '.join(request.args)}"
        )
    if isinstance(request, RangeInfo):
        return (
            f"RangeInfo in {document} at offset {request.offset} "
            f"for length {request.length} with args: {' '.join(request.args)}"
        )
    if isinstance(request, CodeComplete):
        return (
            f"CodeComplete in {document} at offset {request.offset} "
            f"with args: {' '.join(request.args)}"
        )
    if isinstance(request, SemanticRefactoring):
        return (
            f"SemanticRefactoring ({request.kind}) in {document} "
            f"at offset {request.offset} with args: {' '.join(request.args)}"
        )
    if isinstance(request, EditorReplaceText):
        return (
            f"ReplaceText in {document} at offset {request.offset} "
            f"for length {request.length} with text: {request.text}"
        )
    msg = f"unsupported request type: {type(request).__name__}"
    raise TypeError(msg)


def headline(error: SourceKitError) -> str:
    """Return the first line of an error report."""
    if isinstance(error, SourceKitCrashed):
        return CRASHED_HEADLINE
    if isinstance(error, SourceKitTimedOut):
        return TIMED_OUT_HEADLINE
    return REASON_HEADLINES[error.kind]


def format_error(error: SourceKitError) -> str:
    """Format an error as a multi-line report ending in the annotated file content."""
    lines = [headline(error), f"  request: {describe_request(error.request)}"]
    if isinstance(error, SourceKitFailed):
        lines.append(f"  response: {error.response}")
    lines.extend(
        [
            BEGIN_CONTENT_LINE,
            render_source_location(error.request),
            END_CONTENT_LINE,
        ]
    )
    return "\n".join(lines)


def format_message(message: StressTesterMessage) -> str:
    """Format a message as a report of the failure it carries."""
    return DETECTED_PREFIX + format_error(message.error)
