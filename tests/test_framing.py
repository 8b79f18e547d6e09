"""Tests for newline-delimited message framing."""

from __future__ import annotations

import io
import logging
import threading
from unittest.mock import MagicMock

from stress_tester_common.codec import encode_bytes, message_from_bytes
from stress_tester_common.framing import MessageWriter, read_messages, write_message
from stress_tester_common.models import (
    CursorInfo,
    DetectedMessage,
    DocumentInfo,
    DocumentModification,
    EditorOpen,
    RewriteMode,
    SourceKitCrashed,
    SourceKitTimedOut,
)

_THREADS = 8
_PER_THREAD = 25


def _message(path: str = "a.swift", content: str = "line one\nline two\n") -> DetectedMessage:
    document = DocumentInfo(
        path=path,
        modification=DocumentModification(mode=RewriteMode.BASIC, content=content),
    )
    return DetectedMessage(error=SourceKitCrashed(request=EditorOpen(document=document)))


def test_write_appends_single_newline() -> None:
    sink = io.BytesIO()
    message = _message()

    write_message(message, sink)

    assert sink.getvalue() == encode_bytes(message) + b"\n"
    assert sink.getvalue().count(b"\n") == 1


def test_write_flushes_every_message() -> None:
    sink = MagicMock()
    writer = MessageWriter(sink)

    writer.write(_message())
    writer.write(_message())

    assert sink.write.call_count == 2
    assert sink.flush.call_count == 2
    assert [c[0] for c in sink.method_calls] == ["write", "flush", "write", "flush"]


def test_concurrent_writers_do_not_interleave() -> None:
    sink = io.BytesIO()
    writer = MessageWriter(sink)

    def _produce(index: int) -> None:
        for n in range(_PER_THREAD):
            writer.write(_message(path=f"t{index}/{n}.swift", content="x" * 500))

    threads = [threading.Thread(target=_produce, args=(i,)) for i in range(_THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = sink.getvalue().splitlines()
    assert len(lines) == _THREADS * _PER_THREAD
    assert all(message_from_bytes(line) is not None for line in lines)


def test_read_messages_skips_blank_and_malformed_lines(caplog) -> None:
    first = _message(path="first.swift")
    second = DetectedMessage(
        error=SourceKitTimedOut(
            request=CursorInfo(document=DocumentInfo(path="second.swift"), offset=1, args=[])
        )
    )
    stream = io.BytesIO(
        b"warning: unrelated output\n"
        + encode_bytes(first)
        + b"\n\n"
        + b'{"message":"detected","error":{"error":"crash\n'
        + encode_bytes(second)
        + b"\r\n"
    )

    with caplog.at_level(logging.DEBUG, logger="stress_tester_common.framing"):
        messages = list(read_messages(stream))

    assert messages == [first, second]
    assert "Skipping undecodable line 1" in caplog.text
    assert "Skipping undecodable line 4" in caplog.text


def test_read_messages_handles_empty_source() -> None:
    assert list(read_messages([])) == []
