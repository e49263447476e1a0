from __future__ import annotations

"""
Truffula: colorized directory tree printer.
"""

__version__ = "1.0.0"
