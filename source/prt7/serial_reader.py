# serial_reader.py
# -*- coding: utf-8 -*-
"""
Line sources for the decoder session.

Both readers expose next_line() -> (line, has_more). An empty line means
"no data yet" (read timeout); has_more=False means the stream is over.
"""
from __future__ import annotations

import logging
import time
from typing import Iterable, Iterator, List, Optional, Tuple

import serial

from .config import BAUD_RATE, MAX_LINE_LENGTH, SERIAL_PORTS, SETTLE_DELAY, TIMEOUT

logger = logging.getLogger(__name__)


class TransportUnavailableError(Exception): pass


class SerialReader:
    """
    Reads newline-terminated frames from a serial port.
    """
    def __init__(self, port: str, baud: int = BAUD_RATE, timeout: float = TIMEOUT,
                 settle_delay: float = SETTLE_DELAY, max_line_length: int = MAX_LINE_LENGTH):
        self.ser = serial.serial_for_url(port, baudrate=baud, timeout=timeout)
        self.max_line_length = max_line_length
        if settle_delay > 0:
            time.sleep(settle_delay)  # port stabilisation

    @property
    def port(self) -> str:
        return self.ser.port

    def _discard_rest_of_line(self) -> None:
        while True:
            chunk = self.ser.read_until(b"\n", self.max_line_length)
            if not chunk or chunk.endswith(b"\n"):
                return

    def next_line(self) -> Tuple[str, bool]:
        raw = self.ser.read_until(b"\n", self.max_line_length)
        if not raw:
            return "", True

        if not raw.endswith(b"\n") and len(raw) >= self.max_line_length:
            logger.warning(f"Line exceeds {self.max_line_length} bytes, dropped: {raw[:32]!r}...")
            self._discard_rest_of_line()
            return "", True

        # latin-1 maps every byte to one character, nothing is lost
        return raw.decode("latin-1").rstrip("\r\n"), True

    def close(self) -> None:
        if self.ser.is_open:
            self.ser.close()
            logger.info(f"Serial port {self.ser.port} closed")

    def __enter__(self) -> "SerialReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ReplayReader:
    """Line source over captured lines (a file, stdin or a plain list)."""

    def __init__(self, lines: Iterable[str], owns_source: bool = True):
        self._source = lines
        self._owns_source = owns_source  # False for sys.stdin
        self._lines: Iterator[str] = iter(lines)

    def next_line(self) -> Tuple[str, bool]:
        try:
            line = next(self._lines)
        except StopIteration:
            return "", False
        return line.rstrip("\r\n"), True

    def close(self) -> None:
        if not self._owns_source:
            return
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "ReplayReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_serial_reader(ports: Optional[List[str]] = None, baud: int = BAUD_RATE,
                       timeout: float = TIMEOUT, settle_delay: float = SETTLE_DELAY) -> SerialReader:
    """
    Try each candidate port in order and return a reader on the first one
    that opens. Raises TransportUnavailableError when none does.
    """
    candidates = list(SERIAL_PORTS if ports is None else ports)
    for port in candidates:
        logger.info(f"Trying serial port {port} (Baud: {baud})...")
        try:
            reader = SerialReader(port, baud, timeout=timeout, settle_delay=settle_delay)
        except (serial.SerialException, ValueError) as e:
            logger.debug(f"Could not open {port}: {e}")
            continue
        logger.info(f"Connection established on {port}")
        return reader

    raise TransportUnavailableError(
        f"Could not connect to any serial port ({', '.join(candidates) or 'none given'}). "
        f"Check that the Arduino is connected."
    )
