"""Top-level envelope sent from a stress tester to its controlling process."""

from __future__ import annotations

from typing import Any, Literal

from stress_tester_common.models.base import WireModel
from stress_tester_common.models.error import SourceKitError


class DetectedMessage(WireModel):
    """A failure detected while stress testing.

    The ``message`` tag is required on the wire; only direct construction
    fills it in.
    """

    message: Literal["detected"]
    error: SourceKitError

    def __init__(self, **data: Any) -> None:
        """Initialize, defaulting the ``message`` tag to ``"detected"``."""
        data.setdefault("message", "detected")
        super().__init__(**data)


# New envelope kinds join this alias as a union discriminated on "message".
StressTesterMessage = DetectedMessage
