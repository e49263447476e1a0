from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies coercion of loose types, palette normalization, strict mode
failures and the assembly of render options.
"""

import os

import pytest

from truffula.core.validator import (
    available_colors,
    build_render_options,
    resolve_color_sequence,
    validate_config,
)
from truffula.domain.colors import ConsoleColor


def test_defaults_injected_for_missing_keys():
    clean, warnings = validate_config({})

    assert warnings == []
    assert clean["show_hidden"] is False
    assert clean["use_color"] is True
    assert clean["color_sequence"] == ["WHITE", "PURPLE", "YELLOW"]
    assert clean["input_path"] == os.path.abspath(os.getcwd())


def test_non_dict_config_uses_defaults():
    clean, warnings = validate_config(["nope"])

    assert clean["use_color"] is True
    assert any("Invalid config type" in w for w in warnings)


def test_non_dict_config_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("raw, expected", [
    ("yes", True), ("no", False), (1, True), (0, False), ("TRUE", True), ("off", False),
])
def test_bool_coercion(raw, expected):
    clean, warnings = validate_config({"show_hidden": raw})

    assert clean["show_hidden"] is expected
    assert len(warnings) == 1


def test_bool_invalid_falls_back():
    clean, warnings = validate_config({"use_color": "maybe"})

    assert clean["use_color"] is True
    assert "expected bool" in warnings[0]


def test_bool_strict_rejects_strings():
    with pytest.raises(TypeError):
        validate_config({"use_color": "yes"}, strict=True)


def test_input_path_normalized(tmp_path):
    clean, _ = validate_config({"input_path": f"  {tmp_path}  "})
    assert clean["input_path"] == os.path.abspath(str(tmp_path))


def test_color_sequence_from_csv_and_case():
    clean, warnings = validate_config({"color_sequence": "red, Green ,blue"})

    assert clean["color_sequence"] == ["RED", "GREEN", "BLUE"]
    assert warnings == []


def test_color_sequence_unknown_names_dropped():
    clean, warnings = validate_config({"color_sequence": ["white", "magenta", "reset", "cyan"]})

    assert clean["color_sequence"] == ["WHITE", "CYAN"]
    assert len(warnings) == 2


def test_color_sequence_empty_result_uses_default():
    clean, warnings = validate_config({"color_sequence": ["nope"]})

    assert clean["color_sequence"] == ["WHITE", "PURPLE", "YELLOW"]
    assert any("empty" in w for w in warnings)


def test_color_sequence_strict_unknown_raises():
    with pytest.raises(ValueError):
        validate_config({"color_sequence": ["WHITE", "ultraviolet"]}, strict=True)


def test_resolve_color_sequence():
    assert resolve_color_sequence(["white", "PURPLE"]) == (ConsoleColor.WHITE, ConsoleColor.PURPLE)
    with pytest.raises(ValueError):
        resolve_color_sequence([])
    with pytest.raises(ValueError):
        resolve_color_sequence(["ultraviolet"])


def test_available_colors_excludes_reset():
    names = available_colors()
    assert "RESET" not in names
    assert {"WHITE", "PURPLE", "YELLOW"} <= set(names)


def test_build_render_options(tmp_path):
    clean, _ = validate_config({"input_path": str(tmp_path), "show_hidden": True, "use_color": False})

    options = build_render_options(clean)

    assert options.root == os.path.abspath(str(tmp_path))
    assert options.show_hidden is True
    assert options.use_color is False
