"""Output buffer with explicit indentation depth."""

from __future__ import annotations


class Layout:
    """Accumulates generated text; nothing reaches the sink until text() is taken.

    Depth is never stored here. Every caller passes the depth it is at, so an
    emitter can be run in isolation from any starting depth.
    """

    INDENT: str = "    "

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, *texts: str) -> None:
        for text in texts:
            self._parts.append(text)

    def newline(self, depth: int) -> None:
        """Line terminator followed by depth indentation units."""
        if depth < 0:
            raise ValueError("negative indentation depth: " + str(depth))
        self._parts.append("\n" + self.INDENT * depth)

    def text(self) -> str:
        return "".join(self._parts)
