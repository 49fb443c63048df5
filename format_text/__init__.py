"""Text formatting library: wrapping, dedenting, indenting and friends.

WHY: Programs that print prose for people (help screens, commit messages,
generated comments) keep re-implementing the same block operations with
slightly different edge cases. This package provides one consistent set of
pure functions, counted in display columns rather than raw characters.

HOW: The block operations live in core.py and are re-exported here. The
single high-level entry point is format_block(text, preset). It resolves
the preset name to a layout dict, builds a Layout and runs the
dedent -> wrap -> indent -> prefix pipeline.

RULES:
- Every public function is pure and safe to call concurrently.
- Preset names: see presets.PRESETS ("terminal" is the default).
- Never mutate the preset constants; copies are made internally.
- Python 3.9.6 compatible (no slots=True, no match/case, no X | Y unions).
"""

import copy
from typing import Any, Optional

from .config import LayoutError, load_layout, validate_layout
from .convert import func_name, human, to_string
from .core import (
    apply_layout,
    dedent,
    display_width,
    indent,
    indent_wrapped,
    indentation_width,
    prefix,
    reflow,
    split_lines,
    wrap,
)
from .helpers import (
    escape_returns,
    human_duration,
    https_url,
    isosec,
    merged_maps,
    unescape_returns,
)
from .models import Layout, Wrapped
from .presets import PRESETS

__version__ = "0.1.0"

__all__ = [
    "format_block",
    "split_lines",
    "display_width",
    "indentation_width",
    "wrap",
    "dedent",
    "indent",
    "prefix",
    "indent_wrapped",
    "reflow",
    "apply_layout",
    "to_string",
    "func_name",
    "human",
    "merged_maps",
    "escape_returns",
    "unescape_returns",
    "human_duration",
    "isosec",
    "https_url",
    "Layout",
    "LayoutError",
    "Wrapped",
    "PRESETS",
    "load_layout",
    "validate_layout",
]


def format_block(
    text: Any,
    preset: str = "terminal",
    config: Optional[dict] = None,
) -> str:
    """Format a block of text with a named layout preset.

    WHY: This is the single high-level entry point of the library. Callers
    that just want "a help paragraph" or "a commit body" pick a preset
    instead of chaining dedent/wrap/indent themselves.

    HOW: Resolves the preset name to a layout dict (or uses a custom
    config), deep-copies it, validates it into a Layout and runs
    apply_layout().

    RULES:
    - preset must be one of the keys of PRESETS.
    - If config is provided, it overrides the preset entirely.
    - Returns an empty string for empty or all-blank text.
    - Thread-safe: each call works on its own config copy.

    Args:
        text: Text to format (anything split_lines() accepts).
        preset: Preset name. Default: "terminal".
        config: Optional custom layout dict. If provided, preset is ignored.

    Returns:
        The formatted text, lines joined by a single newline.

    Raises:
        ValueError: If preset name is not recognized and no config is provided.
        LayoutError: If config does not match the layout schema.
    """
    if config is not None:
        cfg = copy.deepcopy(config)
    else:
        if preset not in PRESETS:
            raise ValueError(
                "Unknown preset '{}'. Available: {}".format(
                    preset, ", ".join(PRESETS.keys())
                )
            )
        cfg = copy.deepcopy(PRESETS[preset])

    return apply_layout(text, validate_layout(cfg))
