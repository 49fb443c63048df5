"""Unit tests for configuration loading (format_text.config).

WHY: Layout files are user-authored JSON. Malformed files must produce a
clear LayoutError instead of a traceback from deep inside jsonschema, and
environment defaults must survive garbage values.

HOW: Layout files are written to tmp_path; environment variables are set
with monkeypatch.
"""

import json
import logging

import pytest

from format_text.config import (
    LayoutError,
    _env_int,
    load_layout,
    validate_layout,
)
from format_text.models import Layout


def _write_layout(tmp_path, data):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadLayout:
    """load_layout() reads and validates JSON layout files."""

    def test_valid_layout(self, tmp_path):
        path = _write_layout(tmp_path, {"width": 72, "indent": 2, "prefix": "> "})
        assert load_layout(path) == Layout(width=72, indent=2, prefix="> ")

    def test_all_fields(self, tmp_path):
        data = {"width": 40, "indent": 0, "prefix": "", "dedent": False, "wrap": False}
        layout = load_layout(_write_layout(tmp_path, data))
        assert layout.dedent is False
        assert layout.wrap is False

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text("{width: 10", encoding="utf-8")
        with pytest.raises(LayoutError, match="not valid JSON"):
            load_layout(path)

    def test_negative_indent_rejected(self, tmp_path):
        path = _write_layout(tmp_path, {"width": 10, "indent": -1})
        with pytest.raises(LayoutError, match="Invalid layout"):
            load_layout(path)

    def test_missing_width_rejected(self, tmp_path):
        path = _write_layout(tmp_path, {"indent": 2})
        with pytest.raises(LayoutError, match="width"):
            load_layout(path)

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_layout(tmp_path / "missing.json")

    def test_success_is_logged(self, tmp_path, caplog):
        path = _write_layout(tmp_path, {"width": 50})
        with caplog.at_level(logging.INFO, logger="format_text.config"):
            load_layout(path)
        assert "Loaded layout" in caplog.text


class TestValidateLayout:
    """validate_layout() and Layout defaults."""

    def test_defaults(self):
        assert validate_layout({"width": 10}) == Layout(
            width=10, indent=0, prefix="", dedent=True, wrap=True
        )

    def test_reflow_flag(self):
        assert validate_layout({"width": 10, "reflow": True}).reflow is True

    @pytest.mark.parametrize("bad", ["\t", "> \x1b", "#\n", "\x7f"])
    def test_prefix_with_control_character_rejected(self, bad):
        with pytest.raises(LayoutError, match="Invalid layout"):
            validate_layout({"width": 10, "prefix": bad})

    def test_printable_prefix_accepted(self):
        assert validate_layout({"width": 10, "prefix": "// "}).prefix == "// "

    def test_layout_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_layout([])


class TestEnvInt:
    """_env_int() falls back on missing or invalid values."""

    def test_reads_integer(self, monkeypatch):
        monkeypatch.setenv("FORMAT_TEXT_TEST_WIDTH", "12")
        assert _env_int("FORMAT_TEXT_TEST_WIDTH", 80) == 12

    def test_invalid_value_falls_back(self, monkeypatch):
        monkeypatch.setenv("FORMAT_TEXT_TEST_WIDTH", "wide")
        assert _env_int("FORMAT_TEXT_TEST_WIDTH", 80) == 80

    def test_unset_falls_back(self, monkeypatch):
        monkeypatch.delenv("FORMAT_TEXT_TEST_WIDTH", raising=False)
        assert _env_int("FORMAT_TEXT_TEST_WIDTH", 80) == 80
