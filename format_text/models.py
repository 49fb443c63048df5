"""Data models for the text formatter.

WHY: The wrapper returns two values (the reflowed text and the word count)
and the layout pipeline needs a structured bundle of width/indent/prefix
settings. Named types make both self-describing at call sites.

HOW: Wrapped is a NamedTuple so existing callers can unpack it as a plain
``(text, count)`` pair. Layout is a dataclass built from a preset dict or a
validated JSON layout file.

RULES:
- Wrapped.count is the number of words in the *input*, never the number
  of output lines.
- Layout instances are built per call; presets are copied, never shared.
- Python 3.9.6 compatible (no slots=True, no match/case, no X | Y unions).
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple


class Wrapped(NamedTuple):
    """Result of wrapping a block of text.

    Attributes:
        text: The reflowed text, lines joined with a single newline.
        count: Number of whitespace-delimited words in the input.
    """
    text: str
    count: int


@dataclass
class Layout:
    """Settings for the dedent -> wrap -> indent -> prefix pipeline.

    Attributes:
        width: Target column width of every output line (prefix included).
        indent: Number of spaces prepended to every line.
        prefix: Literal string prepended to every line after indenting.
        dedent: Strip the common leading indentation before wrapping.
        wrap: Reflow lines to the width; False only re-indents/prefixes.
        reflow: Join the lines of each paragraph before wrapping.
    """
    width: int
    indent: int = 0
    prefix: str = ""
    dedent: bool = True
    wrap: bool = True
    reflow: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Layout":
        """Build a Layout from a preset or layout-file dict."""
        return cls(
            width=int(data["width"]),
            indent=int(data.get("indent", 0)),
            prefix=str(data.get("prefix", "")),
            dedent=bool(data.get("dedent", True)),
            wrap=bool(data.get("wrap", True)),
            reflow=bool(data.get("reflow", False)),
        )
