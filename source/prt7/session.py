# session.py
# -*- coding: utf-8 -*-
"""
Decoder session: reads lines from a line source, handles the control
sentinels, and feeds every other line through the frame parser into the
rotor/payload pair until FIN or end of stream.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol, Tuple

from .config import BANNER_SENTINEL, FIN_SENTINEL
from .frames import MalformedFrameError, interpret, parse_frame
from .payload import Payload
from .reports import (BannerReport, FinalReport, FinReport, MalformedReport,
                      ReportEvent, describe)
from .rotor import Rotor

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    def next_line(self) -> Tuple[str, bool]: ...
    def close(self) -> None: ...


class ReportObserver(Protocol):
    def handle(self, event: ReportEvent) -> None: ...


class DecoderSession:
    def __init__(self) -> None:
        self.rotor = Rotor()
        self.payload = Payload()
        self.frames_processed = 0
        self.malformed = 0
        self.finished = False

    def process_line(self, line: str) -> Optional[ReportEvent]:
        """Apply one input line; returns None for an empty line."""
        if not line.strip():
            return None

        if line == FIN_SENTINEL:
            self.finished = True
            return FinReport(line)

        if line == BANNER_SENTINEL:
            return BannerReport(line)

        try:
            frame = parse_frame(line)
        except MalformedFrameError as e:
            self.malformed += 1
            return MalformedReport(line, str(e))

        event = interpret(frame, self.rotor, self.payload)
        self.frames_processed += 1
        return event

    def final_report(self) -> FinalReport:
        return FinalReport(self.payload.render(), self.frames_processed, self.malformed)

    def _report(self, event: ReportEvent, observers: Iterable[ReportObserver]) -> None:
        if isinstance(event, MalformedReport):
            logger.warning(describe(event))
        else:
            logger.info(describe(event))
        for observer in observers:
            observer.handle(event)

    def run(self, source: LineSource, observers: Iterable[ReportObserver] = ()) -> str:
        """
        Decode until FIN or end of stream and return the assembled message.

        The final report is emitted once and the source is closed on every
        exit path; Ctrl-C counts as a graceful stop.
        """
        observers = list(observers)
        try:
            try:
                while not self.finished:
                    line, has_more = source.next_line()
                    event = self.process_line(line)
                    if event is not None:
                        self._report(event, observers)
                    if not has_more:
                        logger.info("Line source exhausted before FIN")
                        break
            except KeyboardInterrupt:
                logger.info("Decoding interrupted (KeyboardInterrupt)")

            final = self.final_report()
            self._report(final, observers)
            return final.message
        finally:
            source.close()
