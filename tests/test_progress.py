from __future__ import annotations

import io
import os

from ytupload.progress import ProgressReporter


def test_count_reaches_total_and_bytes_are_unchanged() -> None:
    payload = os.urandom(100_000)
    out = io.StringIO()

    with ProgressReporter(io.BytesIO(payload), len(payload), file=out) as progress:
        chunks = []
        while True:
            chunk = progress.reader.read(8192)
            if not chunk:
                break
            chunks.append(chunk)
        assert progress.count == len(payload)

    assert b"".join(chunks) == payload
    assert progress.bar.total == len(payload)


def test_seek_and_tell_pass_through() -> None:
    stream = io.BytesIO(b"0123456789")
    progress = ProgressReporter(stream, 10, file=io.StringIO())

    progress.reader.seek(0, os.SEEK_END)
    assert progress.reader.tell() == 10
    progress.reader.seek(4)
    assert progress.reader.read(3) == b"456"
    assert progress.count == 3
    progress.finish()


def test_empty_stream() -> None:
    progress = ProgressReporter(io.BytesIO(b""), 0, file=io.StringIO())

    assert progress.reader.read() == b""
    assert progress.count == 0
    progress.finish()
