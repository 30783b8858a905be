# frames.py
# -*- coding: utf-8 -*-
"""
PRT-7 frame language: parsing one text line into a frame, and applying a
frame to the rotor/payload pair.

Wire format:
    L,<char>     load one character (L,Spa... stands for a space)
    M,<int>      rotate the rotor by a signed delta
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple, Union

from .payload import Payload
from .reports import LoadReport, MapReport
from .rotor import Rotor

logger = logging.getLogger(__name__)

SPACE_TOKEN_PREFIX = "Spa"

# sign plus leading digits; anything after them is ignored
_INT_PREFIX_RE = re.compile(r"[+-]?([0-9]*)")


class MalformedFrameError(ValueError): pass


class Load(NamedTuple):
    character: str


class Map(NamedTuple):
    delta: int


Frame = Union[Load, Map]


def _parse_int_prefix(text: str) -> int:
    m = _INT_PREFIX_RE.match(text)
    if not m.group(1):
        return 0
    return int(m.group(0))


def parse_frame(line: Union[str, bytes]) -> Frame:
    """
    Parse one line into a Load or Map frame.

    Raises MalformedFrameError when the separator is missing, the frame type
    is unknown, or a LOAD frame carries no character.
    """
    if isinstance(line, bytes):
        line = line.decode("latin-1")

    if len(line) < 2 or line[1] != ",":
        raise MalformedFrameError("missing ',' after frame type")

    frame_type, body = line[0], line[2:]

    if frame_type == "L":
        if not body:
            raise MalformedFrameError("LOAD frame without a character")
        # prefix match only: "L,Spa" and "L,Space" both mean a space
        if body.startswith(SPACE_TOKEN_PREFIX):
            return Load(" ")
        return Load(body[0])

    if frame_type == "M":
        return Map(_parse_int_prefix(body))

    raise MalformedFrameError(f"unknown frame type {frame_type!r}")


def interpret(frame: Frame, rotor: Rotor, payload: Payload) -> Union[LoadReport, MapReport]:
    if isinstance(frame, Load):
        decoded = rotor.map_character(frame.character)
        payload.append(decoded)
        logger.debug(f"LOAD {frame.character!r} -> {decoded!r} (head={rotor.current_head()})")
        return LoadReport(frame.character, decoded, payload.render_bracketed())

    if isinstance(frame, Map):
        rotor.rotate(frame.delta)
        logger.debug(f"MAP {frame.delta:+d} -> offset {rotor.offset}")
        return MapReport(frame.delta, rotor.current_head())

    raise TypeError(f"not a frame: {frame!r}")
