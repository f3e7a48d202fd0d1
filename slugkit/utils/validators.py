# slugkit/utils/validators.py
import re

from ..errors import InvalidIdentifierError, InvalidSeparatorError

# Table / column names are interpolated into SQL, so only plain identifiers pass.
IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
WS_RE = re.compile(r"\s")


def ensure_identifier(name: str, kind: str = "identifier") -> str:
    if not isinstance(name, str) or not IDENT_RE.fullmatch(name):
        raise InvalidIdentifierError(f"invalid {kind}: {name!r}")
    return name


def ensure_separator(separator: str) -> str:
    if not isinstance(separator, str) or separator == "":
        raise InvalidSeparatorError("separator must be a non-empty string")
    if WS_RE.search(separator):
        raise InvalidSeparatorError("separator must not contain whitespace")
    return separator


def parse_bool(raw, default: bool = False) -> bool:
    """
    Accepts the usual env/JSON spellings:
      true/false, 1/0, yes/no, on/off  (case-insensitive)
    Anything else falls back to `default`.
    """
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    s = str(raw).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    return default
