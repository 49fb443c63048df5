"""Shared test fixtures for the format_text test suite.

WHY: Several test modules check the same properties (width bounds, word
count invariance, dedent idempotence) over a common set of inputs.
Centralizing the corpus here keeps those checks consistent.

HOW: Pytest fixtures provide a list of sample texts covering prose,
indented blocks, hard breaks, control characters and non-ASCII text, plus
a help-screen description written the way it would appear in source code
and its expected help-screen rendering.

RULES:
- Sample texts never end with a line terminator unless the test needs it.
- The corpus is returned as a fresh list per test.
"""

from typing import List

import pytest


SAMPLE_TEXTS: List[str] = [
    "some thing",
    "There I was not knowing what to do about this exceedingly long line "
    "and knowing that certain people would shun me for injecting\n"
    "returns wherever I wanted.",
    "\n    foo\n    bar",
    "\n\n   \n\n    foo\n      bar\n    baz",
    "\t\tdef main():\n\t\t\treturn 0",
    "first paragraph of text\n\nsecond paragraph of text",
    "supercalifragilisticexpialidocious is a rather long word",
    "café naïve résumé \U0001F49A emoji and cafe\u0301",
    "\x1b[1mbold\x1b[0m and \x1b[31mred\x1b[0m words",
    "   lots    of\t\tirregular   whitespace   ",
    "line one\r\nline two\r\nline three",
    "",
]

DESCRIPTION = """
		The y2j command converts YAML (including references and
		anchors) to compressed JSON (with a single training newline) using
		the popular Go yaml.v3 package and its special <yaml:",inline"> tag.
		Because of this only YAML maps are supported as a base type (no
		arrays). An array can easily be done as the value of a map key.

		"""


@pytest.fixture
def sample_texts():
    """Corpus of sample texts for property-style checks."""
    return list(SAMPLE_TEXTS)


@pytest.fixture
def description():
    """A command description indented the way it sits in source code."""
    return DESCRIPTION


HELP_OUTPUT = "\n".join([
    "       The y2j command converts YAML (including references",
    "       and anchors) to compressed JSON (with a single",
    "       training newline) using the popular Go yaml.v3",
    "       package and its special <yaml:\",inline\"> tag. Because",
    "       of this only YAML maps are supported as a base type",
    "       (no arrays). An array can easily be done as the value",
    "       of a map key.",
])


@pytest.fixture
def help_output():
    """DESCRIPTION reflowed into one paragraph at indent 7, width 60."""
    return HELP_OUTPUT
