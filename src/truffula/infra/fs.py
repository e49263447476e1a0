from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the directory listing capability consumed by the tree renderer,
cross-platform hidden-entry detection, user data directory resolution and
path normalization. Acts as an abstraction over the 'os' and 'stat' modules
so the renderer never touches the real filesystem directly.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Truffula"
UNIX_APP_DIR_NAME = ".truffula"

# -----------------------------------------------------------------------------
# LISTING CAPABILITY
# -----------------------------------------------------------------------------

class FileSystem(ABC):
    """
    Read-only view of a hierarchical filesystem addressed by path strings.
    """

    @abstractmethod
    def list_children(self, path: str) -> List[str]:
        """
        List the direct children of a directory as full paths.

        Order is unspecified. Unreadable or non-directory paths yield an
        empty list instead of raising.
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_hidden(self, path: str) -> bool:
        pass

    def name(self, path: str) -> str:
        """Return the base name of an entry, falling back to the path itself."""
        return entry_name(path)


class LocalFileSystem(FileSystem):
    """FileSystem implementation backed by the host operating system."""

    def list_children(self, path: str) -> List[str]:
        try:
            names = os.listdir(path)
        except OSError as e:
            logger.debug(f"Cannot list '{path}': {e}")
            return []
        return [os.path.join(path, n) for n in names]

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_hidden(self, path: str) -> bool:
        """
        Detect hidden entries on both platform conventions.

        Unix-like systems mark hidden entries with a leading dot. Windows
        uses the FILE_ATTRIBUTE_HIDDEN flag, exposed by os.stat through
        'st_file_attributes'.
        """
        if entry_name(path).startswith("."):
            return True
        try:
            st = os.stat(path, follow_symlinks=False)
        except OSError:
            return False
        attrs = getattr(st, "st_file_attributes", 0)
        return bool(attrs & stat.FILE_ATTRIBUTE_HIDDEN)


def entry_name(path: str) -> str:
    """
    Extract the display name of a path.

    Trailing separators are ignored. Filesystem roots ('/', 'C:\\') have no
    base name and are returned unchanged.
    """
    name = os.path.basename(os.path.normpath(path))
    return name or path

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/Truffula
    - Linux/Mac: ~/.truffula

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Cannot create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def save_tree(save_path: str, lines: List[str]) -> bool:
    """
    Persist plain tree lines to a UTF-8 text file.

    Args:
        save_path: Destination file. Parent directories are created.
        lines: Uncolored tree lines without terminators.

    Returns:
        bool: True on success, False if the file could not be written.
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
        return False
