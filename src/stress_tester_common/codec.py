"""JSON wire codec for the stress tester protocol.

Every tagged union is encoded as one JSON object: a discriminator field
naming the variant plus that variant's payload fields.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from stress_tester_common.models import (
    Page,
    RequestInfo,
    SourceKitError,
    StressTesterMessage,
)
from stress_tester_common.models.base import WireModel

T = TypeVar("T")

_REQUEST_ADAPTER: TypeAdapter[RequestInfo] = TypeAdapter(RequestInfo)
_ERROR_ADAPTER: TypeAdapter[SourceKitError] = TypeAdapter(SourceKitError)
_MESSAGE_ADAPTER: TypeAdapter[StressTesterMessage] = TypeAdapter(StressTesterMessage)
_PAGE_ADAPTER: TypeAdapter[Page] = TypeAdapter(Page)


class WireDecodeError(ValueError):
    """Raised when input does not decode to a value of the expected type."""


def encode(value: WireModel) -> str:
    """Encode a wire value as compact JSON text.

    Absent optionals are omitted. JSON string escaping guarantees the
    result holds no raw newline.
    """
    return value.model_dump_json(exclude_none=True)


def encode_bytes(value: WireModel) -> bytes:
    """Encode a wire value as compact UTF-8 JSON."""
    return encode(value).encode("utf-8")


def _decode(adapter: TypeAdapter[T], data: str | bytes, what: str) -> T:
    try:
        return adapter.validate_json(data)
    except ValidationError as exc:
        msg = f"invalid {what}: {exc.error_count()} error(s)"
        raise WireDecodeError(msg) from exc


def decode_request(data: str | bytes) -> RequestInfo:
    """Decode a request object, dispatching on its ``request`` tag."""
    return _decode(_REQUEST_ADAPTER, data, "request")


def decode_error(data: str | bytes) -> SourceKitError:
    """Decode a SourceKit error object, dispatching on its ``error`` tag."""
    return _decode(_ERROR_ADAPTER, data, "error")


def decode_message(data: str | bytes) -> StressTesterMessage:
    """Decode a top-level message, dispatching on its ``message`` tag."""
    return _decode(_MESSAGE_ADAPTER, data, "message")


def decode_page(data: str | bytes) -> Page:
    """Decode a page object."""
    return _decode(_PAGE_ADAPTER, data, "page")


def message_from_bytes(data: bytes) -> StressTesterMessage | None:
    """Decode a message, returning None for malformed or unrelated input."""
    try:
        return decode_message(data)
    except WireDecodeError:
        return None
