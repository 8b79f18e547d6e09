"""Newline-delimited framing of messages over a byte stream."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, BinaryIO

from stress_tester_common.codec import encode_bytes, message_from_bytes

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stress_tester_common.models import StressTesterMessage

logger = logging.getLogger(__name__)
_DELIMITER = b"\n"


class MessageWriter:
    """Write one encoded message per line to a binary sink.

    Each write encodes the message, then writes the full line and flushes
    under a lock, so producers sharing the writer never interleave lines.
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize with the sink that receives framed messages."""
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, message: StressTesterMessage) -> None:
        """Write a single message line and flush the sink."""
        line = encode_bytes(message) + _DELIMITER
        with self._lock:
            self._stream.write(line)
            self._stream.flush()
        logger.debug("Wrote message=%s (%d bytes)", message.message, len(line))


def write_message(message: StressTesterMessage, stream: BinaryIO) -> None:
    """Write a single framed message to ``stream``."""
    MessageWriter(stream).write(message)


def read_messages(source: Iterable[bytes]) -> Iterator[StressTesterMessage]:
    """Yield each decodable message from newline-delimited byte records.

    Blank and undecodable lines are skipped.
    """
    for line_number, raw in enumerate(source, start=1):
        line = raw.rstrip(b"\r\n")
        if not line.strip():
            continue
        message = message_from_bytes(line)
        if message is None:
            logger.debug("Skipping undecodable line %d (%d bytes)", line_number, len(line))
            continue
        yield message
