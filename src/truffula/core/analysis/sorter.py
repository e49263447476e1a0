from __future__ import annotations

"""
Sibling Entry Sorter.

Orders the children of a directory by name, case-insensitively. Files and
directories are mixed in a single sequence. Names equal under case folding
are ordered by exact code point comparison, so 'Cat.png' precedes 'cat.png'.
"""

import os
from typing import Callable, Iterable, List, Tuple

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sort_key(name: str) -> Tuple[str, str]:
    """Build the total-order key: lowercase name first, exact name second."""
    return name.lower(), name


def sort_names(names: Iterable[str]) -> List[str]:
    """
    Return sibling names in case-insensitive order with exact-case tie-break.

    Args:
        names: Unordered entry names.

    Returns:
        List[str]: A new sorted list.
    """
    return sorted(names, key=sort_key)


def sort_paths(
        paths: Iterable[str],
        name_of: Callable[[str], str] = os.path.basename,
) -> List[str]:
    """
    Return sibling paths ordered by their entry names.

    Args:
        paths: Unordered full paths of entries sharing one parent.
        name_of: Extracts the name compared for each path.

    Returns:
        List[str]: A new sorted list of paths.
    """
    return sorted(paths, key=lambda p: sort_key(name_of(p)))
