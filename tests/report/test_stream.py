# topmark:header:start
#
#   project      : SymReport
#   file         : test_stream.py
#   file_relpath : tests/report/test_stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for incremental report rendering into a text sink."""

from __future__ import annotations

import io

import pytest

from symreport.report import (
    Generator,
    Info,
    Message,
    Metadata,
    ReportStream,
    StreamState,
    StreamStateError,
)

PROLOGUE = (
    "<analysis>\n"
    "<metadata>\n"
    '<generator name="klee" version="3.1"/>\n'
    "</metadata>\n"
    "<results>\n"
)
EPILOGUE = "</results>\n</analysis>\n"


def _info(text: str) -> Info:
    return Info(taxonomy_id="other", message=Message(text))


def test_open_writes_prologue() -> None:
    sink = io.StringIO()
    stream = ReportStream(sink, Metadata(generator=Generator("klee", "3.1")))

    stream.open()

    assert sink.getvalue() == PROLOGUE
    assert stream.state is StreamState.OPEN


def test_full_document_with_results() -> None:
    sink = io.StringIO()
    with ReportStream(sink, Metadata(generator=Generator("klee", "3.1"))) as stream:
        stream.write(_info("one"))
        stream.write(_info("two"))

    assert stream.written == 2
    assert sink.getvalue() == (
        PROLOGUE
        + '<info info-id="other">\n<message>one</message>\n</info>\n'
        + '<info info-id="other">\n<message>two</message>\n</info>\n'
        + EPILOGUE
    )


def test_prologue_without_metadata() -> None:
    sink = io.StringIO()
    with ReportStream(sink):
        pass

    assert sink.getvalue() == "<analysis>\n<results>\n</results>\n</analysis>\n"


def test_epilogue_written_exactly_once() -> None:
    sink = io.StringIO()
    stream = ReportStream(sink)
    stream.open()
    stream.open()
    stream.close()
    stream.close()

    assert sink.getvalue().count("<analysis>") == 1
    assert sink.getvalue().count("</analysis>") == 1


def test_close_without_open_writes_nothing() -> None:
    sink = io.StringIO()
    stream = ReportStream(sink)

    stream.close()

    assert sink.getvalue() == ""
    assert stream.state is StreamState.CLOSED


def test_write_before_open_raises() -> None:
    stream = ReportStream(io.StringIO())

    with pytest.raises(StreamStateError):
        stream.write(_info("early"))


def test_write_after_close_raises() -> None:
    stream = ReportStream(io.StringIO())
    stream.open()
    stream.close()

    with pytest.raises(StreamStateError):
        stream.write(_info("late"))


def test_stream_does_not_close_sink() -> None:
    sink = io.StringIO()
    with ReportStream(sink):
        pass

    assert not sink.closed
