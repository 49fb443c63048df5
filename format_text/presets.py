"""Named layout presets for the formatting pipeline.

WHY: Most callers format text for one of a few well-known targets. Named
presets keep the width/indent/prefix numbers in one place instead of
scattered over call sites.

HOW: Each preset is a plain dict matching config.LAYOUT_SCHEMA. PRESETS
maps names (and aliases) to those dicts. format_block() deep-copies the
chosen preset before building a Layout, so the constants are never mutated.

RULES:
- Preset names: "terminal" (default), "help", "commit", "narrow",
  "comment", plus the alias "tty" for "terminal".
- The terminal width follows FORMAT_TEXT_WIDTH (default 80).
- "help" reflows each source paragraph into one flowing block.
- Never mutate the preset constants; copies are made by callers.
"""

from .config import DEFAULT_WIDTH

# Plain terminal output: full width, flush left
PRESET_TERMINAL = {
    "width": DEFAULT_WIDTH,
    "indent": 0,
    "prefix": "",
    "dedent": True,
    "wrap": True,
    "reflow": False,
}

# Command descriptions in help screens: indented body under a heading
PRESET_HELP = {
    "width": 60,
    "indent": 7,
    "prefix": "",
    "dedent": True,
    "wrap": True,
    "reflow": True,
}

# Git commit message bodies
PRESET_COMMIT = {
    "width": 72,
    "indent": 0,
    "prefix": "",
    "dedent": True,
    "wrap": True,
    "reflow": False,
}

# Side panels and narrow columns
PRESET_NARROW = {
    "width": 40,
    "indent": 2,
    "prefix": "",
    "dedent": True,
    "wrap": True,
    "reflow": False,
}

# Generated source comments (shell, Python, YAML)
PRESET_COMMENT = {
    "width": 79,
    "indent": 0,
    "prefix": "# ",
    "dedent": True,
    "wrap": True,
    "reflow": False,
}

PRESETS = {
    "terminal": PRESET_TERMINAL,
    "tty": PRESET_TERMINAL,  # Alias
    "help": PRESET_HELP,
    "commit": PRESET_COMMIT,
    "narrow": PRESET_NARROW,
    "comment": PRESET_COMMENT,
}
