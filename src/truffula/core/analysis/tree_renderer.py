from __future__ import annotations

"""
Tree Renderer.

Walks a directory depth-first in pre-order and converts every visible entry
into an indented line. Hidden entries are pruned together with their whole
subtree. Colors are selected from the palette by depth alone, cycling every
three levels.
"""

import io
import logging
import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

from truffula.core.analysis.sorter import sort_paths
from truffula.domain.colors import COLOR_CYCLE_LENGTH, DEFAULT_COLOR_SEQUENCE, ConsoleColor
from truffula.domain.tree_models import RenderOptions, TreeLine
from truffula.infra.console import ColorPrinter
from truffula.infra.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def color_index(depth: int, palette_size: int) -> int:
    """
    Map a depth level to a palette position.

    The cycle is three levels long. Palettes with fewer than three colors
    wrap inside the cycle; colors past the third are never selected.
    """
    return (depth % COLOR_CYCLE_LENGTH) % palette_size


def iter_tree_lines(
        options: RenderOptions,
        color_sequence: Sequence[ConsoleColor] = DEFAULT_COLOR_SEQUENCE,
        fs: Optional[FileSystem] = None,
) -> Iterator[TreeLine]:
    """
    Yield the tree lines of options.root in depth-first pre-order.

    Args:
        options: Root path and hidden/color switches.
        color_sequence: Palette indexed by depth when color is enabled.
        fs: Listing capability. Defaults to the local filesystem.

    Yields:
        TreeLine: One record per visible entry, root first.
    """
    if options.root is None:
        return
    if options.use_color and not color_sequence:
        raise ValueError("Color sequence must not be empty when color is enabled.")

    fs = fs or LocalFileSystem()
    yield from _walk(options.root, options, tuple(color_sequence), fs)


def render_tree(
        options: RenderOptions,
        color_sequence: Optional[Sequence[ConsoleColor]] = None,
        fs: Optional[FileSystem] = None,
) -> str:
    """
    Render the complete tree into a string, escapes included.

    Returns:
        str: Exactly what TreePrinter writes to its stream.
    """
    buffer = io.StringIO()
    TreePrinter(options, out=buffer, color_sequence=color_sequence, fs=fs).print_tree()
    return buffer.getvalue()


class TreePrinter:
    """
    Prints a directory tree to a text stream through a ColorPrinter.

    Example output (colors omitted):

        myFolder/
           Apple.txt
           banana.txt
           Documents/
              images/
                 Cat.png
                 cat.png
                 Dog.png
              notes.txt
              README.md
           zebra.txt
    """

    def __init__(
            self,
            options: RenderOptions,
            out: Optional[TextIO] = None,
            color_sequence: Optional[Sequence[ConsoleColor]] = None,
            fs: Optional[FileSystem] = None,
    ) -> None:
        palette = tuple(color_sequence) if color_sequence is not None else DEFAULT_COLOR_SEQUENCE
        if not palette:
            raise ValueError("Color sequence must contain at least one color.")

        self.options = options
        self.color_sequence = palette
        self._fs = fs or LocalFileSystem()
        self._out = ColorPrinter(out if out is not None else sys.stdout)

    def print_tree(self) -> List[str]:
        """
        Write every visible entry and return the plain lines.

        Returns:
            List[str]: Uncolored line texts in output order.
        """
        plain: List[str] = []
        for line in iter_tree_lines(self.options, self.color_sequence, self._fs):
            self._out.println(line.text, line.color)
            plain.append(line.text)
        self._out.flush()

        logger.debug(f"Printed {len(plain)} tree lines for: {self.options.root}")
        return plain

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(
        root: str,
        options: RenderOptions,
        palette: Sequence[ConsoleColor],
        fs: FileSystem,
) -> Iterator[TreeLine]:
    """
    Pre-order visit of root and its subtree.

    Uses an explicit stack of (path, depth) pairs so tree depth is not
    bounded by the interpreter recursion limit. Children are pushed in
    reverse sorted order so they pop in sorted order.
    """
    stack: List[Tuple[str, int]] = [(root, 0)]

    while stack:
        path, depth = stack.pop()

        # Pruning: a hidden directory hides its descendants too
        if not options.show_hidden and fs.is_hidden(path):
            continue

        is_dir = fs.is_dir(path)
        color = palette[color_index(depth, len(palette))] if options.use_color else None
        yield TreeLine(depth=depth, name=fs.name(path), is_dir=is_dir, color=color)

        if is_dir:
            children = sort_paths(fs.list_children(path), name_of=fs.name)
            stack.extend((child, depth + 1) for child in reversed(children))
