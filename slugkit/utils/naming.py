# slugkit/utils/naming.py
import itertools
import re
import time
import unicodedata
from datetime import datetime
from typing import Optional, Union

from .char_maps import PUNCTUATION, QUOTES

FALLBACK_PREFIX = "item"

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")
_ASCII_LETTERS_RE = re.compile(r"[A-Za-z]+")
_NON_ASCII_ALNUM_RE = re.compile(r"[^A-Za-z0-9\s]")
# longest entries first so "..." wins over "." at the same position
_PUNCT_RE = re.compile(
    "|".join(re.escape(p) for p in sorted(PUNCTUATION, key=len, reverse=True))
)
_QUOTE_TABLE = {ord(q): None for q in QUOTES}

_token_seq = itertools.count()


def to_unicode(value: Union[str, bytes, None]) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", "replace")
    # lone surrogates cannot be encoded; swap them for "?"
    value = value.encode("utf-8", "replace").decode("utf-8")
    return unicodedata.normalize("NFC", value)


def strip_markup(s: str) -> str:
    return _TAG_RE.sub("", s)


def strip_quotes(s: str) -> str:
    return s.translate(_QUOTE_TABLE)


def punctuation_to_space(s: str) -> str:
    return _PUNCT_RE.sub(" ", s)


def scrub_non_ascii(s: str) -> str:
    return _NON_ASCII_ALNUM_RE.sub(" ", s)


def collapse_whitespace(s: str) -> str:
    return _WS_RE.sub(" ", s).strip()


def collapse_separator(s: str, separator: str) -> str:
    double = separator + separator
    while double in s:
        s = s.replace(double, separator)
    return s


def trim_separator(s: str, separator: str) -> str:
    while s.startswith(separator):
        s = s[len(separator):]
    while s.endswith(separator):
        s = s[: -len(separator)]
    return s


def fold_ascii_case(s: str) -> str:
    return _ASCII_LETTERS_RE.sub(lambda m: m.group(0).lower(), s)


def _unique_token() -> str:
    """13 hex chars: microsecond clock plus a per-process sequence."""
    micros = time.time_ns() // 1000
    return f"{(micros << 8 | next(_token_seq) & 0xFF) & (16 ** 13 - 1):013x}"


def fallback_slug(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"{FALLBACK_PREFIX}-{now:%Y-%m-%d-%H-%M-%S}-{_unique_token()}"
