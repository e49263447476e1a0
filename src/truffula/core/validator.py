from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted configuration sources (CLI flags,
the JSON config file) and the renderer. Handles type coercion, path
normalization, palette resolution and default value injection.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from truffula.domain.colors import ColorSequence, ConsoleColor
from truffula.domain.config import get_default_config
from truffula.domain.tree_models import RenderOptions
from truffula.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "output_file"]
_BOOL_FIELDS = ["show_hidden", "use_color"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Fills missing keys with domain defaults and converts loosely typed values
    (CSV strings, 'yes'/'no', 0/1) into their native types.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["color_sequence"] = _as_color_names(
        merged.get("color_sequence"), defaults["color_sequence"], warnings, strict
    )

    merged["input_path"] = normalize_path(merged["input_path"], defaults["input_path"])
    if merged["output_file"]:
        merged["output_file"] = normalize_path(merged["output_file"], "")

    return merged, warnings


def resolve_color_sequence(names: Sequence[str]) -> ColorSequence:
    """
    Translate validated color names into ConsoleColor members.

    Raises:
        ValueError: If a name is unknown or the result is empty.
    """
    try:
        palette = tuple(ConsoleColor[_normalize_color_name(n)] for n in names)
    except KeyError as e:
        raise ValueError(f"Unknown color: {e.args[0]}") from e
    if not palette:
        raise ValueError("Color sequence must contain at least one color.")
    return palette


def build_render_options(config: Dict[str, Any]) -> RenderOptions:
    """
    Assemble immutable render options from a validated configuration.
    """
    return RenderOptions(
        root=config.get("input_path") or None,
        show_hidden=bool(config.get("show_hidden", False)),
        use_color=bool(config.get("use_color", True)),
    )


def available_colors() -> List[str]:
    """Names accepted in a color sequence."""
    return [c.name for c in ConsoleColor if c is not ConsoleColor.RESET]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_color_names(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Normalize a palette into a non-empty list of known color names."""
    if value is None:
        return list(fallback)

    if isinstance(value, str):
        value = [x for x in (s.strip() for s in value.split(",")) if x]
    if not isinstance(value, (list, tuple)):
        msg = f"Invalid field 'color_sequence': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    known = set(available_colors())
    out: List[str] = []
    for i, item in enumerate(value):
        name = _normalize_color_name(item) if isinstance(item, str) else ""
        if name in known:
            out.append(name)
            continue
        msg = f"Invalid item in 'color_sequence[{i}]': unknown color {item!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Item discarded.")

    if not out:
        if strict:
            raise ValueError("Field 'color_sequence' must contain at least one color.")
        warnings.append("Field 'color_sequence' is empty. Using default palette.")
        return list(fallback)
    return out


def _normalize_color_name(name: str) -> str:
    return name.strip().upper()

