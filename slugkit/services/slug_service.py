# slugkit/services/slug_service.py
from typing import Optional, Union

from ..config import SlugSettings
from ..models import NormalizationOptions, TransliterationMode
from ..utils.char_maps import DIGITS_TO_ASCII, translate_chars
from ..utils.naming import (
    collapse_separator,
    collapse_whitespace,
    fallback_slug,
    fold_ascii_case,
    punctuation_to_space,
    scrub_non_ascii,
    strip_markup,
    strip_quotes,
    to_unicode,
    trim_separator,
)
from ..utils.validators import ensure_separator
from .transliteration import (
    ManualTransliterator,
    Transliterator,
    load_library_transliterator,
    select_transliterator,
)


class SlugService:
    """
    Text -> slug. Pure: no I/O and no state beyond what is fixed in __init__,
    so one instance can be shared across threads.
    """

    def __init__(self, settings: Optional[SlugSettings] = None):
        self.settings = settings or SlugSettings()
        self._default = select_transliterator(self.settings)
        self._manual = ManualTransliterator()
        self._library = load_library_transliterator()

    @property
    def transliterator(self) -> Optional[Transliterator]:
        return self._default

    def _strategy(self, options: Optional[NormalizationOptions]) -> Optional[Transliterator]:
        if options is None:
            return self._default
        if options.preserve_original:
            return None
        mode = options.transliteration_mode
        if mode is TransliterationMode.MANUAL:
            return self._manual
        if mode is TransliterationMode.INTL:
            return self._library or self._manual
        if self._default is not None:
            return self._default
        if self.settings.use_intl and self._library is not None:
            return self._library
        return self._manual

    def generate(
        self,
        text: Union[str, bytes, None],
        separator: Optional[str] = None,
        fallback: Optional[str] = None,
        options: Optional[NormalizationOptions] = None,
    ) -> str:
        if separator is None:
            separator = options.separator if options else self.settings.default_separator
        ensure_separator(separator)

        s = to_unicode(text)
        if not s.strip():
            return fallback or fallback_slug()

        s = strip_markup(s)
        s = strip_quotes(s)

        strategy = self._strategy(options)
        if strategy is not None:
            s = strategy.transliterate(s)
        s = translate_chars(s, DIGITS_TO_ASCII)

        s = punctuation_to_space(s)
        if strategy is not None:
            s = scrub_non_ascii(s)
        s = collapse_whitespace(s)
        # fold before the separator goes in, so a letter separator keeps its case
        if strategy is not None:
            s = fold_ascii_case(s)
        s = s.replace(" ", separator)
        s = collapse_separator(s, separator)
        s = trim_separator(s, separator)

        if not s or s == separator:
            return fallback or fallback_slug()
        return s
