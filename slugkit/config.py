# slugkit/config.py
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .utils.validators import parse_bool


def load_config() -> Dict[str, Any]:
    return {
        "FLASK_ENV": os.getenv("FLASK_ENV", "production"),
        "PORT": int(os.getenv("PORT", "8080")),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        "CORS_ORIGINS": [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
        "BQ_DATASET": os.getenv("BQ_DATASET", "slugs"),
        "SLUG_BACKEND": os.getenv("SLUG_BACKEND", "bigquery").lower(),
        "SLUG_KEY_COLUMN": os.getenv("SLUG_KEY_COLUMN", "id"),
        "SLUG_DEFAULT_SEPARATOR": os.getenv("SLUG_DEFAULT_SEPARATOR", "-"),
        "SLUG_DEFAULT_COLUMN": os.getenv("SLUG_DEFAULT_COLUMN", "slug"),
        "SLUG_DEFAULT_SOURCE_FIELD": os.getenv("SLUG_DEFAULT_SOURCE_FIELD", "name"),
        "SLUG_REGENERATE_ON_UPDATE": parse_bool(os.getenv("SLUG_REGENERATE_ON_UPDATE"), True),
        "SLUG_PRESERVE_ORIGINAL": parse_bool(os.getenv("SLUG_PRESERVE_ORIGINAL"), True),
        "SLUG_USE_INTL": parse_bool(os.getenv("SLUG_USE_INTL"), True),
        "SLUG_MAX_ATTEMPTS": int(os.getenv("SLUG_MAX_ATTEMPTS", "100")),
        "SLUG_RANDOM_ATTEMPTS": int(os.getenv("SLUG_RANDOM_ATTEMPTS", "3")),
    }


@dataclass(frozen=True)
class SlugSettings:
    """Process-wide defaults, built once at startup and passed to the services."""
    default_separator: str = "-"
    default_column: str = "slug"
    default_source_field: str = "name"
    regenerate_on_update: bool = True
    preserve_original: bool = True
    use_intl: bool = True
    max_attempts: int = 100
    random_attempts: int = 3

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "SlugSettings":
        return cls(
            default_separator=cfg["SLUG_DEFAULT_SEPARATOR"],
            default_column=cfg["SLUG_DEFAULT_COLUMN"],
            default_source_field=cfg["SLUG_DEFAULT_SOURCE_FIELD"],
            regenerate_on_update=cfg["SLUG_REGENERATE_ON_UPDATE"],
            preserve_original=cfg["SLUG_PRESERVE_ORIGINAL"],
            use_intl=cfg["SLUG_USE_INTL"],
            max_attempts=cfg["SLUG_MAX_ATTEMPTS"],
            random_attempts=cfg["SLUG_RANDOM_ATTEMPTS"],
        )


@dataclass(frozen=True)
class SlugOverrides:
    """Per-record values; None means "use the global default"."""
    source_field: Optional[str] = None
    separator: Optional[str] = None
    column: Optional[str] = None
    regenerate_on_update: Optional[bool] = None


@dataclass(frozen=True)
class SlugConfig:
    source_field: str
    separator: str
    column: str
    regenerate_on_update: bool


def _pick(override, default):
    return default if override is None else override


def resolve(overrides: Optional[SlugOverrides], settings: SlugSettings) -> SlugConfig:
    o = overrides or SlugOverrides()
    return SlugConfig(
        source_field=_pick(o.source_field, settings.default_source_field),
        separator=_pick(o.separator, settings.default_separator),
        column=_pick(o.column, settings.default_column),
        regenerate_on_update=_pick(o.regenerate_on_update, settings.regenerate_on_update),
    )
