from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process with captured streams. The stored configuration
is redirected to tmp_path so the real user folder is never touched.
"""

import json
from unittest.mock import patch

import pytest

from truffula.infra.logging import reset_logging
from truffula.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, capsys):
    """Redirect config storage and undo logging before stream capture ends."""
    data_dir = tmp_path / "userdata"
    data_dir.mkdir()
    with patch("truffula.domain.config.get_user_data_dir", return_value=str(data_dir)):
        yield data_dir
    reset_logging()


@pytest.fixture
def sample_dir(build_tree):
    return build_tree("proj", {
        "b.txt": None,
        "A.txt": None,
        ".secret": None,
        "src": {"main.py": None},
    })


def test_main_prints_plain_tree(sample_dir, capsys):
    code = main([str(sample_dir), "--no-color"])

    assert code == 0
    assert capsys.readouterr().out == "proj/\n   A.txt\n   b.txt\n   src/\n      main.py\n"


def test_main_prints_colored_tree_by_default(sample_dir, capsys):
    code = main(["-i", str(sample_dir), "--use-defaults"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("\033[0;37mproj/\n\033[0m\033[0;35m   A.txt\n\033[0m")
    assert "\033[0;33m      main.py\n\033[0m" in out


def test_main_show_hidden(sample_dir, capsys):
    main([str(sample_dir), "-a", "--no-color"])
    assert "   .secret\n" in capsys.readouterr().out


def test_main_custom_colors(sample_dir, capsys):
    main([str(sample_dir), "--colors", "red,green"])
    out = capsys.readouterr().out
    assert out.startswith("\033[0;31mproj/\n")
    assert "\033[0;32m   A.txt\n" in out
    # Depth 2 wraps back to the first color of a two-color palette
    assert "\033[0;31m      main.py\n" in out


def test_main_missing_input_returns_2(tmp_path, capsys):
    code = main([str(tmp_path / "missing")])

    assert code == 2
    assert "does not exist" in capsys.readouterr().err


def test_main_file_input_returns_2(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("", encoding="utf-8")
    assert main([str(target)]) == 2


def test_main_dump_config(sample_dir, capsys):
    code = main([str(sample_dir), "--dump-config", "-a"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["show_hidden"] is True
    assert data["color_sequence"] == ["WHITE", "PURPLE", "YELLOW"]


def test_main_saves_plain_tree(sample_dir, tmp_path, capsys):
    target = tmp_path / "saved" / "tree.txt"

    code = main([str(sample_dir), "-o", str(target)])

    assert code == 0
    assert "\033" in capsys.readouterr().out
    assert target.read_text(encoding="utf-8") == "proj/\n   A.txt\n   b.txt\n   src/\n      main.py\n"


def test_main_save_config_persists_preferences(sample_dir, isolated_environment, capsys):
    assert main([str(sample_dir), "--no-color", "--save-config"]) == 0
    stored = json.loads((isolated_environment / "config.json").read_text(encoding="utf-8"))
    assert stored["last_session"]["use_color"] is False

    capsys.readouterr()
    # Stored preference applies without the flag
    main([str(sample_dir)])
    assert "\033" not in capsys.readouterr().out


def test_main_rendering_failure_returns_1(sample_dir, capsys):
    with patch("truffula.interface.cli.app.TreePrinter.print_tree", side_effect=RuntimeError("boom")):
        code = main([str(sample_dir)])

    assert code == 1
    assert "boom" in capsys.readouterr().err


def test_main_interrupt_returns_130(sample_dir):
    with patch("truffula.interface.cli.app.TreePrinter.print_tree", side_effect=KeyboardInterrupt):
        assert main([str(sample_dir)]) == 130


def test_merge_config_ignores_none_and_unknown_keys():
    base = {"input_path": "/a", "use_color": True}
    merged = _merge_config(base, {"input_path": None, "use_color": False, "bogus": 1})

    assert merged == {"input_path": "/a", "use_color": False}
