# slugkit/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol


class TransliterationMode(str, Enum):
    INTL = "intl"
    MANUAL = "manual"


@dataclass(frozen=True)
class NormalizationOptions:
    separator: str = "-"
    preserve_original: bool = True
    transliteration_mode: Optional[TransliterationMode] = None


class ExistenceCheck(Protocol):
    def exists(
        self,
        table: str,
        column: str,
        candidate: str,
        exclude_key: Optional[Any] = None,
    ) -> bool:
        ...
