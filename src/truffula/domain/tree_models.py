from __future__ import annotations

"""
Directory Tree Data Models.

Provides the immutable render options consumed by the tree renderer and
the line records it emits. No tree structure is materialized: entries are
read from the filesystem transiently during the walk.
"""

from dataclasses import dataclass
from typing import Optional

from truffula.domain.colors import ConsoleColor

# Indentation unit repeated once per depth level
INDENT_UNIT: str = "   "


@dataclass(frozen=True)
class RenderOptions:
    """
    Immutable configuration for a single tree rendering run.

    Attributes:
        root: Directory to render. None produces no output.
        show_hidden: Whether hidden entries (and their subtrees) are printed.
        use_color: Whether lines are wrapped in ANSI color escapes.
    """
    root: Optional[str]
    show_hidden: bool = False
    use_color: bool = True


@dataclass(frozen=True)
class TreeLine:
    """
    One rendered entry of the directory tree.

    Attributes:
        depth: Number of ancestor directories between the entry and the root.
        name: Base name of the entry.
        is_dir: Whether the entry is a directory.
        color: Color applied to the line, or None for plain output.
    """
    depth: int
    name: str
    is_dir: bool
    color: Optional[ConsoleColor] = None

    @property
    def display_name(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name

    @property
    def text(self) -> str:
        return INDENT_UNIT * self.depth + self.display_name
