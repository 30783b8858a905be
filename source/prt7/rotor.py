# rotor.py
# -*- coding: utf-8 -*-
"""
Rotating substitution table over the 26 uppercase letters.

The alphabet itself never changes; only the head offset moves. Mapping a
letter at alphabet position p returns the symbol p steps after the head.
"""
from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase
ROTOR_SIZE = len(ALPHABET)


class Rotor:
    def __init__(self) -> None:
        self._symbols = ALPHABET
        self._head = 0

    @property
    def offset(self) -> int:
        """Index of the head symbol, always in 0..25."""
        return self._head

    def rotate(self, delta: int) -> None:
        """Shift the head by delta positions, backwards when negative."""
        self._head = (self._head + delta) % ROTOR_SIZE

    def map_character(self, c: str) -> str:
        if not ('A' <= c <= 'Z'):
            return c
        p = ord(c) - ord('A')
        return self._symbols[(self._head + p) % ROTOR_SIZE]

    def current_head(self) -> str:
        return self._symbols[self._head]

    def __repr__(self) -> str:
        return f"Rotor(head={self.current_head()!r}, offset={self._head})"
