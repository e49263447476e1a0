from __future__ import annotations

"""
Color-Aware Console Writer.

Wraps a text stream and emits lines optionally surrounded by ANSI color
escapes. Each colored line is written independently as
color + text + newline + reset.
"""

import sys
from typing import Optional, TextIO

from truffula.domain.colors import ConsoleColor


class ColorPrinter:
    """
    Line writer that applies a color, prints, and resets after every line.

    Attributes:
        current_color: Color applied to subsequent lines when no explicit
            color is passed. None means plain output.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out: TextIO = out if out is not None else sys.stdout
        self.current_color: Optional[ConsoleColor] = None

    def set_current_color(self, color: Optional[ConsoleColor]) -> None:
        self.current_color = color

    def println(self, text: str, color: Optional[ConsoleColor] = None) -> None:
        """
        Write a single line.

        Args:
            text: Line content without terminator.
            color: Explicit color for this line; falls back to current_color.
        """
        active = color if color is not None else self.current_color
        if active is None or active is ConsoleColor.RESET:
            self._out.write(f"{text}\n")
        else:
            self._out.write(f"{active.code}{text}\n{ConsoleColor.RESET.code}")

    def flush(self) -> None:
        self._out.flush()
