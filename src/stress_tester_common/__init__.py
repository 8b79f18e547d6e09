"""Wire protocol shared by the SourceKit stress tester and its controlling process."""

from stress_tester_common.codec import (
    WireDecodeError,
    decode_error,
    decode_message,
    decode_page,
    decode_request,
    encode,
    encode_bytes,
    message_from_bytes,
)
from stress_tester_common.framing import MessageWriter, read_messages, write_message
from stress_tester_common.logging import configure_from_settings, configure_logging
from stress_tester_common.reports import format_error, format_message

__all__ = [
    "MessageWriter",
    "WireDecodeError",
    "configure_from_settings",
    "configure_logging",
    "decode_error",
    "decode_message",
    "decode_page",
    "decode_request",
    "encode",
    "encode_bytes",
    "format_error",
    "format_message",
    "message_from_bytes",
    "read_messages",
    "write_message",
]
