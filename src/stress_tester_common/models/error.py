"""Backend failure models describing how SourceKit failed to service a request."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, StrictStr

from stress_tester_common.models.base import WireModel
from stress_tester_common.models.request import RequestInfo


class SourceKitErrorReason(StrEnum):
    """Enumerate why a SourceKit response was judged invalid."""

    ERROR_RESPONSE = "errorResponse"
    ERROR_TYPE_IN_RESPONSE = "errorTypeInResponse"
    ERROR_DESERIALIZING_SYNTAX_TREE = "errorDeserializingSyntaxTree"
    SOURCE_AND_SYNTAX_TREE_MISMATCH = "sourceAndSyntaxTreeMismatch"


class SourceKitCrashed(WireModel):
    """SourceKit crashed while servicing ``request``."""

    error: Literal["crashed"] = "crashed"
    request: RequestInfo


class SourceKitTimedOut(WireModel):
    """SourceKit did not answer ``request`` in time."""

    error: Literal["timedOut"] = "timedOut"
    request: RequestInfo


class SourceKitFailed(WireModel):
    """SourceKit answered ``request`` with a response judged invalid."""

    error: Literal["failed"] = "failed"
    kind: SourceKitErrorReason
    request: RequestInfo
    response: StrictStr


SourceKitError = Annotated[
    SourceKitCrashed | SourceKitTimedOut | SourceKitFailed,
    Field(discriminator="error"),
]
