"""Core text formatting logic: line splitting, width counting, wrapping, indentation.

WHY: Help screens, commit messages, generated comments and terminal output
all need the same handful of block operations: reflow a paragraph to a
column budget, strip the indentation a triple-quoted literal picked up in
source code, and re-indent or re-prefix the result. This module holds the
whole engine so every caller shares one consistent set of semantics.

HOW: The functions are layered leaf-first:
  1. split_lines() and display_width() are the leaves.
  2. wrap() reflows each input line greedily at whitespace, counting
     display columns through display_width().
  3. dedent() strips the indentation of the first non-blank line from
     every line that follows it.
  4. indent(), prefix() and indent_wrapped() prepend a fixed string to
     every line; apply_layout() chains the whole pipeline for a Layout.

RULES:
- Every function is pure: no global state, no I/O, safe for concurrent use.
- All width checks use display_width() so ANSI escapes and invisible
  characters never distort the column budget.
- Hard line breaks in the input survive wrapping; words are never split.
- dedent() removes the reference count of characters from every line, even
  when a later line is indented less (the "accidental chop").
- Regular expressions are compiled once at import time.
"""

import logging
import re
import unicodedata
from itertools import groupby
from typing import Any, List

from .convert import to_string
from .models import Layout, Wrapped

logger = logging.getLogger(__name__)

# =============================================================================
# Text Utilities
# =============================================================================

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
BLANK_RE = re.compile(r"\s*")

# Zs and Mc take a column; Mn/Me combine onto the previous glyph.
_GRAPHIC_CATEGORIES = frozenset({"Zs", "Mc"})


def is_blank(line: str) -> bool:
    """True if line is empty or contains only whitespace."""
    return BLANK_RE.fullmatch(line) is not None


def is_graphic(ch: str) -> bool:
    """True if ch is a visible glyph that occupies one display column."""
    category = unicodedata.category(ch)
    return category[0] in "LNPS" or category in _GRAPHIC_CATEGORIES


# =============================================================================
# Line Splitting
# =============================================================================

def split_lines(text: Any) -> List[str]:
    """Split text into lines on ``\\n`` or ``\\r\\n`` boundaries.

    WHY: Every block operation works line by line, and callers hand us
    anything from file contents to bytes read off a pipe.

    HOW: Coerces the input with to_string(), splits on ``\\n`` and drops one
    trailing ``\\r`` from each line. A final terminator does not produce an
    extra empty line.

    RULES:
    - Empty input returns an empty list.
    - Leading and interior empty lines are kept.
    - A lone ``\\r`` inside a line is content, not a terminator.
    - Never raises; undecodable bytes pass through as surrogate escapes.

    Args:
        text: A string, bytes-like object, or any value with a str() form.

    Returns:
        List of lines without their terminators.
    """
    buf = to_string(text)
    if not buf:
        return []

    lines = buf.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


# =============================================================================
# Display Width
# =============================================================================

def display_width(text: Any) -> int:
    """Return the number of display columns text occupies.

    ANSI escape sequences are removed first. Each remaining graphic code
    point (letters, numbers, punctuation, symbols, spaces, spacing marks)
    counts as one column; control, format and combining characters count
    as zero. Wide East-Asian glyphs are not modelled.
    """
    visible = ANSI_ESCAPE_RE.sub("", to_string(text))
    return sum(1 for ch in visible if is_graphic(ch))


def indentation_width(line: Any) -> int:
    """Count leading whitespace code points of line.

    A whitespace-only line returns its full length; an empty line returns 0.
    Code points are counted, not bytes, so ``" \\U0001F49Aome"`` is 1.
    """
    line = to_string(line)
    return len(line) - len(line.lstrip())


# =============================================================================
# Word Wrapping
# =============================================================================

def wrap(text: Any, width: int) -> Wrapped:
    """Reflow text into lines no wider than width display columns.

    WHY: Help text and messages are authored as free-flowing prose but must
    be printed inside a fixed column budget without breaking words.

    HOW: Splits the input into lines, then splits each line into words
    (collapsing whitespace runs). Blank lines at both ends of the block are
    dropped. Each line is packed greedily: a word joins the current output
    line unless that would push it past width, in which case the current
    line is emitted and the word starts a new one.

    RULES:
    - Every input line is a hard break: it ends the current output line.
    - Interior blank lines survive as empty output lines.
    - A word wider than width is placed alone on its own line, never split.
    - width < 1 only normalizes whitespace, it does not reflow. Line breaks
      are kept even here, so wrap("a  b\\n c", 0) is "a b\\nc", not the
      single collapsed line "a b c". Use reflow() first for that.
    - count is the input word count and does not depend on width.

    Args:
        text: Text to wrap (anything split_lines() accepts).
        width: Target column width.

    Returns:
        Wrapped(text, count) with lines joined by a single newline.
    """
    paragraphs = [line.split() for line in split_lines(text)]

    while paragraphs and not paragraphs[0]:
        paragraphs.pop(0)
    while paragraphs and not paragraphs[-1]:
        paragraphs.pop()

    count = sum(len(words) for words in paragraphs)

    lines = []  # type: List[str]
    for words in paragraphs:
        if width < 1 or not words:
            lines.append(" ".join(words))
        else:
            lines.extend(_fill(words, width))

    return Wrapped("\n".join(lines), count)


def _fill(words: List[str], width: int) -> List[str]:
    """Greedily pack words into lines of at most width columns."""
    lines = []  # type: List[str]
    current = [words[0]]
    used = display_width(words[0])

    for word in words[1:]:
        size = display_width(word)
        if used + 1 + size > width:
            lines.append(" ".join(current))
            current = [word]
            used = size
        else:
            current.append(word)
            used += 1 + size

    lines.append(" ".join(current))
    return lines


def reflow(text: Any) -> str:
    """Join the lines of each paragraph into one line.

    Paragraphs are runs of non-blank lines; each run becomes a single line
    of stripped, space-joined text. Blank lines between paragraphs are
    kept as empty lines so wrap() still sees the paragraph breaks.
    """
    out = []  # type: List[str]
    for blank, group in groupby(split_lines(text), key=is_blank):
        if blank:
            out.extend("" for _ in group)
        else:
            out.append(" ".join(line.strip() for line in group))
    return "\n".join(out)


# =============================================================================
# Dedent
# =============================================================================

def dedent(text: Any) -> str:
    """Strip the indentation of the first non-blank line from every line.

    WHY: Text written inside indented source code (docstrings, triple-quoted
    templates) carries the code's indentation. Callers want the text as if
    it had been written flush left.

    HOW: Skips the leading run of blank lines, measures the indentation of
    the first remaining line, then removes that many characters from the
    start of that line and every line after it.

    RULES:
    - All-blank (or empty) input returns "".
    - The same number of characters is removed from every retained line,
      whitespace or not. A line indented less than the reference loses
      content ("    foo\\n   bar" becomes "foo\\nar"); a line shorter than
      the reference becomes empty. Such lines are logged at DEBUG level.
    - Trailing terminators are not preserved.

    Args:
        text: Text to dedent (anything split_lines() accepts).

    Returns:
        The dedented lines joined by a single newline.
    """
    lines = split_lines(text)

    skip = 0
    while skip < len(lines) and is_blank(lines[skip]):
        skip += 1

    if skip == len(lines):
        return ""

    width = indentation_width(lines[skip])

    out = []  # type: List[str]
    for number, line in enumerate(lines[skip:], start=skip + 1):
        if not is_blank(line[:width]):
            logger.debug(
                "Line %d is indented less than %d columns, chopping %r",
                number, width, line[:width],
            )
        out.append(line[width:])

    return "\n".join(out)


# =============================================================================
# Indent and Prefix
# =============================================================================

def prefix(text: Any, literal: str) -> str:
    """Prepend literal to every line of text.

    No trailing newline is added; blank lines are prefixed too.
    """
    return "\n".join(literal + line for line in split_lines(text))


def indent(text: Any, spaces: int) -> str:
    """Prepend spaces to every line of text (nothing when spaces <= 0)."""
    return prefix(text, " " * spaces)


def indent_wrapped(text: Any, spaces: int, width: int) -> str:
    """Wrap text at width - spaces, then indent it by spaces.

    The content width is reduced by the indentation so no indented line is
    wider than width, except a single word that is wider on its own.
    A negative spaces is treated as 0.
    """
    spaces = max(spaces, 0)
    return indent(wrap(text, width - spaces).text, spaces)


# =============================================================================
# Layout Pipeline
# =============================================================================

def apply_layout(text: Any, layout: Layout) -> str:
    """Run text through the dedent -> wrap -> indent -> prefix pipeline.

    WHY: Callers usually want several block operations with the same
    settings every time (a help screen, a commit body). A Layout bundles
    those settings so the sequence lives in one place.

    HOW: Optionally dedents, optionally joins each paragraph into one line
    with reflow(), then wraps and indents through indent_wrapped(). The
    prefix's own display width is charged against the column budget before
    wrapping so the prefixed line still fits.

    RULES:
    - layout.dedent=False keeps the original indentation when layout.wrap
      is also False; wrapping always normalizes leading whitespace.
    - layout.reflow=True turns source line breaks inside a paragraph into
      spaces; otherwise every source line break is kept.
    - layout.wrap=False skips reflowing and only re-indents/prefixes.
    - The prefix is measured with display_width(), so control characters
      in it count as zero columns. Layouts built through validate_layout()
      reject such prefixes.
    - Empty or all-blank input returns "".

    Args:
        text: Text to lay out.
        layout: Width, indent, prefix and dedent settings.

    Returns:
        The formatted block, lines joined by a single newline.
    """
    block = to_string(text)
    if is_blank(block):
        return ""

    if layout.dedent:
        block = dedent(block)

    if layout.reflow:
        block = reflow(block)

    if layout.wrap:
        budget = layout.width - display_width(layout.prefix)
        block = indent_wrapped(block, layout.indent, budget)
    else:
        block = indent(block, layout.indent)

    if layout.prefix:
        block = prefix(block, layout.prefix)

    return block
