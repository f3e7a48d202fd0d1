# slugkit/services/transliteration.py
import importlib.util
import logging
from typing import Callable, Optional, Protocol

from ..config import SlugSettings
from ..utils.char_maps import LATIN_DIACRITICS, SCRIPT_TO_LATIN, translate_chars

logger = logging.getLogger(__name__)

_LIBRARY_MODULE = "unidecode"


class Transliterator(Protocol):
    name: str

    def transliterate(self, text: str) -> str:
        ...


class ManualTransliterator:
    """Script map first, then Latin diacritics. Unknown characters pass through."""
    name = "manual"

    def transliterate(self, text: str) -> str:
        return translate_chars(translate_chars(text, SCRIPT_TO_LATIN), LATIN_DIACRITICS)


class LibraryTransliterator:
    """Any script -> Latin -> ASCII -> lowercase, in one pass, via Unidecode."""
    name = "intl"

    def __init__(self, fn: Callable[[str], str]):
        self._fn = fn

    def transliterate(self, text: str) -> str:
        return self._fn(text).lower()


def library_available() -> bool:
    return importlib.util.find_spec(_LIBRARY_MODULE) is not None


def load_library_transliterator() -> Optional[LibraryTransliterator]:
    if not library_available():
        logger.debug("%s not installed; manual transliteration only", _LIBRARY_MODULE)
        return None
    from unidecode import unidecode
    return LibraryTransliterator(unidecode)


def select_transliterator(settings: SlugSettings) -> Optional[Transliterator]:
    """
    Picks the strategy once, at service construction.
    Returns None when originals are preserved (no transliteration at all).
    """
    if settings.preserve_original:
        return None
    if settings.use_intl:
        lib = load_library_transliterator()
        if lib is not None:
            logger.debug("transliteration strategy: %s", lib.name)
            return lib
    logger.debug("transliteration strategy: manual")
    return ManualTransliterator()
