"""Value models for the stress tester wire protocol."""

from stress_tester_common.models.document import (
    DocumentInfo,
    DocumentModification,
    RewriteMode,
)
from stress_tester_common.models.error import (
    SourceKitCrashed,
    SourceKitError,
    SourceKitErrorReason,
    SourceKitFailed,
    SourceKitTimedOut,
)
from stress_tester_common.models.message import DetectedMessage, StressTesterMessage
from stress_tester_common.models.page import Page
from stress_tester_common.models.request import (
    CodeComplete,
    CursorInfo,
    EditorClose,
    EditorOpen,
    EditorReplaceText,
    RangeInfo,
    RequestInfo,
    SemanticRefactoring,
)

__all__ = [
    "CodeComplete",
    "CursorInfo",
    "DetectedMessage",
    "DocumentInfo",
    "DocumentModification",
    "EditorClose",
    "EditorOpen",
    "EditorReplaceText",
    "Page",
    "RangeInfo",
    "RequestInfo",
    "RewriteMode",
    "SemanticRefactoring",
    "SourceKitCrashed",
    "SourceKitError",
    "SourceKitErrorReason",
    "SourceKitFailed",
    "SourceKitTimedOut",
    "StressTesterMessage",
]
