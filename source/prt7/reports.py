# reports.py
# -*- coding: utf-8 -*-
"""
Report events produced while decoding a session.

The session loop hands each event to the console logger and to any
attached observers (CSV session log, rotor plot).
"""
from __future__ import annotations

from typing import NamedTuple, Union


class BannerReport(NamedTuple):
    line: str


class LoadReport(NamedTuple):
    original: str
    decoded: str
    payload: str  # bracketed rendering, e.g. "[H][O][L][A]"


class MapReport(NamedTuple):
    delta: int
    head: str


class MalformedReport(NamedTuple):
    line: str
    reason: str


class FinReport(NamedTuple):
    line: str


class FinalReport(NamedTuple):
    message: str
    frames_processed: int
    malformed: int


ReportEvent = Union[BannerReport, LoadReport, MapReport, MalformedReport, FinReport, FinalReport]

EVENT_TYPES = {
    BannerReport: "BANNER",
    LoadReport: "LOAD",
    MapReport: "MAP",
    MalformedReport: "MALFORMED",
    FinReport: "FIN",
    FinalReport: "FINAL",
}


def event_type(event: ReportEvent) -> str:
    return EVENT_TYPES[type(event)]


def describe(event: ReportEvent) -> str:
    """One console line for an event."""
    if isinstance(event, LoadReport):
        return (f"Fragment '{event.original}' decoded as '{event.decoded}'. "
                f"Message: {event.payload}")
    if isinstance(event, MapReport):
        return f"ROTATING ROTOR {event.delta:+d}. ('A' now maps to '{event.head}')"
    if isinstance(event, BannerReport):
        return f"Control message received: [{event.line}]"
    if isinstance(event, MalformedReport):
        return f"Frame received: [{event.line}] -> ERROR: malformed frame ({event.reason})"
    if isinstance(event, FinReport):
        return f"Frame received: [{event.line}]. Stopping."
    if isinstance(event, FinalReport):
        return (f"HIDDEN MESSAGE ASSEMBLED: {event.message!r} "
                f"({event.frames_processed} frames, {event.malformed} malformed)")
    raise TypeError(f"unknown report event: {event!r}")
