"""Conversions from arbitrary values to text.

WHY: The block operations accept whatever the caller has in hand (bytes
read from a pipe, numbers, lists of characters) and diagnostics want a
short, readable rendering of arbitrary objects. Both need one predictable
place that decides how a value becomes text.

HOW: to_string() and human() are functools.singledispatch registries keyed
by type. Each registered implementation handles one closed family of
inputs; everything else falls through to the default implementation.
Callers can register their own types without touching this module.

RULES:
- to_string() never raises; bytes decode as UTF-8 with surrogate escapes.
- human() prefers an object's own human() method when the type has no
  registered implementation.
- func_name() raises TypeError for non-callables.
"""

import functools
import inspect
from typing import Any, Callable


# =============================================================================
# Stringification
# =============================================================================

@functools.singledispatch
def to_string(value: Any) -> str:
    """Convert value to text; numbers and other objects use str()."""
    return str(value)


@to_string.register(str)
def _str_to_string(value: str) -> str:
    return value


@to_string.register(bytes)
@to_string.register(bytearray)
@to_string.register(memoryview)
def _bytes_to_string(value: Any) -> str:
    return bytes(value).decode("utf-8", errors="surrogateescape")


@to_string.register(list)
@to_string.register(tuple)
def _chars_to_string(value: Any) -> str:
    # A sequence of single characters is a code-point sequence.
    if value and all(isinstance(ch, str) and len(ch) == 1 for ch in value):
        return "".join(value)
    return str(value)


# =============================================================================
# Function Names
# =============================================================================

def func_name(fn: Callable) -> str:
    """Return the declared name of a callable.

    Nested functions and methods report their last name component, lambdas
    report ``"<lambda>"``, partials report the wrapped function's name and
    callable instances report their class name.

    Raises:
        TypeError: If fn is not callable.
    """
    if not callable(fn):
        raise TypeError(
            "func_name() expects a callable, got {}".format(type(fn).__name__)
        )

    if isinstance(fn, functools.partial):
        return func_name(fn.func)

    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if not name:
        name = type(fn).__qualname__

    return name.split(".")[-1]


# =============================================================================
# Human-Friendly Rendering
# =============================================================================

@functools.singledispatch
def human(value: Any) -> str:
    """Render value for people rather than for machines.

    WHY: Log messages and CLI errors often need to show "what was passed"
    without repr() noise such as escaped non-ASCII characters.

    HOW: Dispatches on type. Unregistered types are checked for a human()
    method, then for being a function, then fall back to to_string().

    RULES:
    - Strings are double-quoted and not escaped.
    - Lists and tuples render as ``[a,b]`` with human() applied to items.
    - Functions render as their func_name().
    """
    method = getattr(value, "human", None)
    if callable(method) and not inspect.isclass(value):
        return to_string(method())

    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return func_name(value)

    return to_string(value)


@human.register(str)
def _human_str(value: str) -> str:
    return '"{}"'.format(value)


@human.register(bytes)
@human.register(bytearray)
def _human_bytes(value: Any) -> str:
    return human(to_string(value))


@human.register(list)
@human.register(tuple)
def _human_sequence(value: Any) -> str:
    return "[{}]".format(",".join(human(item) for item in value))
