"""Configuration defaults, layout file loading, and logging setup.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Default widths and the default preset differ between
machines (a wide terminal, a 72-column commit editor), so they come from
the environment rather than from code.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read from environment variables. Layout files are JSON documents
validated against LAYOUT_SCHEMA with jsonschema before they become Layout
objects.

RULES:
- All defaults can be overridden via environment variables (or .env).
- Invalid integer environment values fall back to the built-in default.
- Invalid layout files raise LayoutError, never a bare jsonschema error.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Union

import jsonschema
from dotenv import load_dotenv

from .models import Layout

logger = logging.getLogger(__name__)

# Load .env from the directory the program is run from
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    raw = os.getenv(name, "").strip()
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Environment defaults
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = _env_int("FORMAT_TEXT_WIDTH", 80)
"""Column width used by the terminal preset and the CLI wrap command."""

DEFAULT_INDENT = _env_int("FORMAT_TEXT_INDENT", 4)
"""Number of spaces used by the CLI indent command."""

DEFAULT_PRESET = os.getenv("FORMAT_TEXT_PRESET", "terminal").strip().lower()
LOG_LEVEL = os.getenv("FORMAT_TEXT_LOG_LEVEL", "WARNING").strip().upper()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# ---------------------------------------------------------------------------
# Layout files
# ---------------------------------------------------------------------------

LAYOUT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "format_text layout",
    "type": "object",
    "properties": {
        "width": {"type": "integer"},
        "indent": {"type": "integer", "minimum": 0},
        # No control characters: they count zero columns in the budget
        "prefix": {"type": "string", "not": {"pattern": "[\\x00-\\x1f\\x7f]"}},
        "dedent": {"type": "boolean"},
        "wrap": {"type": "boolean"},
        "reflow": {"type": "boolean"},
    },
    "required": ["width"],
    "additionalProperties": False,
}


class LayoutError(ValueError):
    """A layout file or dict could not be turned into a Layout."""


def validate_layout(data: Any) -> Layout:
    """Validate a layout dict against LAYOUT_SCHEMA and build a Layout.

    Raises:
        LayoutError: If data does not match the schema.
    """
    try:
        jsonschema.validate(instance=data, schema=LAYOUT_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise LayoutError("Invalid layout: {}".format(exc.message)) from exc
    return Layout.from_dict(data)


def load_layout(path: Union[str, os.PathLike]) -> Layout:
    """Load a JSON layout file.

    WHY: Projects keep their own formatting rules (a comment prefix, a
    narrower width) next to their sources instead of passing flags.

    HOW: Reads the file as UTF-8 JSON, validates it with validate_layout()
    and returns the resulting Layout.

    RULES:
    - Missing files propagate OSError unchanged.
    - Malformed JSON and schema violations raise LayoutError naming the file.

    Args:
        path: Path to the JSON layout file.

    Returns:
        The validated Layout.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise LayoutError(
                "Layout file {} is not valid JSON: {}".format(path, exc)
            ) from exc

    try:
        layout = validate_layout(data)
    except LayoutError as exc:
        raise LayoutError("{} ({})".format(exc, path)) from exc

    logger.info("Loaded layout from %s: width=%d indent=%d", path, layout.width, layout.indent)
    return layout


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
