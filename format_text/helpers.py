"""Small standalone helpers that travel with the text formatter.

WHY: Programs that format text for people tend to need the same few
one-liners around it: merging option dicts, escaping line breaks for
single-line logs, printing durations and timestamps, and turning a bare
host into a URL. Keeping them here saves every caller from rewriting them.

RULES:
- All helpers are pure and never mutate their inputs.
- Timestamps are always UTC.
"""

import copy
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union

from .convert import to_string

_UNESCAPE_RE = re.compile(r"\\([\\rn])")
_UNESCAPES = {"\\": "\\", "r": "\r", "n": "\n"}
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


# =============================================================================
# Maps
# =============================================================================

def merged_maps(*maps: Mapping) -> Dict[Any, Any]:
    """Merge maps left to right into a new dict.

    Later maps win key by key. When both sides hold a mapping under the same
    key they are merged recursively. Values are deep-copied so the result
    shares nothing with the inputs.
    """
    result = {}  # type: Dict[Any, Any]
    for mapping in maps:
        for key, value in mapping.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                result[key] = merged_maps(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result


# =============================================================================
# Escaping
# =============================================================================

def escape_returns(text: Any) -> str:
    r"""Escape backslashes, carriage returns and newlines (``\n`` -> ``\\n``)."""
    return (
        to_string(text)
        .replace("\\", "\\\\")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def unescape_returns(text: Any) -> str:
    """Reverse escape_returns(); unknown escape sequences are left alone."""
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(1)], to_string(text))


# =============================================================================
# Durations and Timestamps
# =============================================================================

def human_duration(value: Union[timedelta, float, int]) -> str:
    """Format a duration compactly, e.g. ``1h2m3s``, ``45s`` or ``250ms``.

    Accepts a timedelta or a number of seconds. Sub-second durations are
    shown in whole milliseconds; longer ones are rounded to whole seconds.
    Hours and minutes are omitted while they are zero.
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    else:
        seconds = float(value)

    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)

    if seconds == 0:
        return "0s"

    millis = int(round(seconds * 1000))
    if millis < 1000:
        return "{}{}ms".format(sign, millis)

    hours, rest = divmod(int(round(seconds)), 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if hours:
        parts.append("{}h".format(hours))
    if hours or minutes:
        parts.append("{}m".format(minutes))
    parts.append("{}s".format(secs))

    return sign + "".join(parts)


def isosec(moment: Optional[datetime] = None) -> str:
    """Return a compact UTC timestamp, ``YYYYMMDDHHMMSS``.

    Naive datetimes are treated as UTC; None means now.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y%m%d%H%M%S")


# =============================================================================
# URLs
# =============================================================================

def https_url(value: Any) -> str:
    """Normalize value into a URL, defaulting to the https scheme.

    Surrounding whitespace is trimmed. Values that already carry a
    ``scheme://`` are returned unchanged, a protocol-relative ``//host``
    gets ``https:`` and anything else gets ``https://``. Empty input stays
    empty.
    """
    url = to_string(value).strip()
    if not url:
        return ""
    if url.startswith("//"):
        return "https:" + url
    if _SCHEME_RE.match(url):
        return url
    return "https://" + url
