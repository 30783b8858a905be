# test_serial_reader.py
import io

import pytest

from prt7.serial_reader import (ReplayReader, SerialReader, TransportUnavailableError,
                                open_serial_reader)


@pytest.fixture
def loop_reader():
    reader = SerialReader("loop://", timeout=0.05, settle_delay=0)
    yield reader
    reader.close()


def test_reads_lines_and_strips_line_endings(loop_reader):
    loop_reader.ser.write(b"L,A\r\nM,-3\nL, \r\n")
    assert loop_reader.next_line() == ("L,A", True)
    assert loop_reader.next_line() == ("M,-3", True)
    assert loop_reader.next_line() == ("L, ", True)


def test_timeout_yields_empty_line(loop_reader):
    assert loop_reader.next_line() == ("", True)


def test_every_byte_survives_decoding(loop_reader):
    loop_reader.ser.write(b"L,\xff\n")
    assert loop_reader.next_line() == ("L,\xff", True)


def test_overlong_line_is_dropped():
    with SerialReader("loop://", timeout=0.05, settle_delay=0, max_line_length=8) as reader:
        reader.ser.write(b"L,ABCDEFGHIJKLMNOP\nL,B\n")
        assert reader.next_line() == ("", True)
        assert reader.next_line() == ("L,B", True)
    assert not reader.ser.is_open


def test_open_serial_reader_skips_unavailable_ports():
    reader = open_serial_reader(["/nonexistent/ttyPRT7", "loop://"], timeout=0.05, settle_delay=0)
    try:
        assert reader.port == "loop://"
    finally:
        reader.close()


def test_open_serial_reader_without_any_port():
    with pytest.raises(TransportUnavailableError):
        open_serial_reader(["/nonexistent/ttyPRT7"], settle_delay=0)
    with pytest.raises(TransportUnavailableError):
        open_serial_reader([], settle_delay=0)


def test_replay_reader_signals_end_of_stream():
    capture = io.StringIO("SISTEMA PRT-7 ACTIVO\r\nL,A\nFIN\n")
    reader = ReplayReader(capture)
    assert reader.next_line() == ("SISTEMA PRT-7 ACTIVO", True)
    assert reader.next_line() == ("L,A", True)
    assert reader.next_line() == ("FIN", True)
    assert reader.next_line() == ("", False)
    reader.close()
    assert capture.closed


def test_replay_reader_over_plain_list():
    with ReplayReader(["M,1"]) as reader:
        assert reader.next_line() == ("M,1", True)
        assert reader.next_line() == ("", False)


def test_replay_reader_leaves_borrowed_stream_open():
    stream = io.StringIO("L,A\n")
    reader = ReplayReader(stream, owns_source=False)
    assert reader.next_line() == ("L,A", True)
    reader.close()
    assert not stream.closed
