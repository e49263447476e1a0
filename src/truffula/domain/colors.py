from __future__ import annotations

"""
Console Color Palette.

Declares the ANSI escape sequences understood by the printer and the
default depth palette used when no custom sequence is configured.
"""

from enum import Enum
from typing import Tuple


class ConsoleColor(Enum):
    """
    Terminal foreground colors expressed as ANSI escape sequences.

    The string form of a member is its raw escape code, so members can be
    concatenated directly into output text.
    """
    RESET = "\033[0m"
    BLACK = "\033[0;30m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    PURPLE = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


ColorSequence = Tuple[ConsoleColor, ...]

DEFAULT_COLOR_SEQUENCE: ColorSequence = (
    ConsoleColor.WHITE,
    ConsoleColor.PURPLE,
    ConsoleColor.YELLOW,
)

# Number of depth levels in one color cycle
COLOR_CYCLE_LENGTH: int = 3
