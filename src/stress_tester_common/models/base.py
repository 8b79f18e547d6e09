"""Base model shared by every value sent over the wire."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Immutable value with an exact JSON field layout.

    Unknown keys are ignored on decode; the discriminator and required
    fields alone decide the shape.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
