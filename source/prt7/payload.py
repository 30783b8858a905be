# payload.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List


class Payload:
    """Append-only sequence of decoded characters forming the hidden message."""

    def __init__(self) -> None:
        self._chars: List[str] = []

    def append(self, c: str) -> None:
        self._chars.append(c)

    def render(self) -> str:
        return "".join(self._chars)

    def render_bracketed(self) -> str:
        # one "[c]" cell per character, as shown on the console
        return "".join(f"[{c}]" for c in self._chars)

    def __len__(self) -> int:
        return len(self._chars)
