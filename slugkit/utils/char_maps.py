# slugkit/utils/char_maps.py
"""
Read-only lookup tables used by the normalizer.

Every table maps one source character (or a short fixed sequence) to its
replacement. A lookup miss means the character passes through unchanged.
"""
from types import MappingProxyType
from typing import Mapping

# Arabic (with the extra Persian/Urdu letters) -> Latin
_ARABIC = {
    "أ": "a", "إ": "i", "آ": "aa", "ا": "a", "ى": "a", "ئ": "y",
    "ؤ": "w", "ب": "b", "ت": "t", "ث": "th", "ج": "j", "ح": "h",
    "خ": "kh", "د": "d", "ذ": "th", "ر": "r", "ز": "z", "س": "s",
    "ش": "sh", "ص": "s", "ض": "d", "ط": "t", "ظ": "z", "ع": "a",
    "غ": "gh", "ف": "f", "ق": "q", "ك": "k", "ل": "l", "م": "m",
    "ن": "n", "ه": "h", "و": "w", "ي": "y", "ة": "h", "ء": "a",
    "پ": "p", "چ": "ch", "ژ": "zh", "گ": "g", "ک": "k", "ی": "y",
}

# Russian Cyrillic -> Latin (lowercase and uppercase)
_CYRILLIC_LOWER = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
    "ё": "yo", "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k",
    "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r",
    "с": "s", "т": "t", "у": "u", "ф": "f", "х": "kh", "ц": "ts",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
}
_CYRILLIC = dict(_CYRILLIC_LOWER)
_CYRILLIC.update({k.upper(): v.capitalize() for k, v in _CYRILLIC_LOWER.items()})

SCRIPT_TO_LATIN: Mapping[str, str] = MappingProxyType({**_ARABIC, **_CYRILLIC})

LATIN_DIACRITICS: Mapping[str, str] = MappingProxyType({
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A", "Æ": "AE",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a", "æ": "ae",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "è": "e", "é": "e", "ê": "e", "ë": "e",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "ì": "i", "í": "i", "î": "i", "ï": "i",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "O", "Ø": "O", "Œ": "OE",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o", "ø": "o", "œ": "oe",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U",
    "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "Ý": "Y", "ý": "y", "ÿ": "y",
    "Ç": "C", "ç": "c", "Ñ": "N", "ñ": "n", "ß": "ss",
    "Ł": "L", "ł": "l", "Ş": "S", "ş": "s", "Ğ": "G", "ğ": "g",
    "İ": "I", "ı": "i", "Č": "C", "č": "c", "Š": "S", "š": "s",
    "Ž": "Z", "ž": "z",
})

# Arabic-Indic and Extended Arabic-Indic (Persian) digits
DIGITS_TO_ASCII: Mapping[str, str] = MappingProxyType({
    **{chr(0x0660 + i): str(i) for i in range(10)},
    **{chr(0x06F0 + i): str(i) for i in range(10)},
})

QUOTES = frozenset('"\'`«»„‚‹›“”‘’')

PUNCTUATION = (
    "...", "..", "…", ".", "(", ")", "[", "]", "{", "}", "،", "؛",
    ":", ",", ";", "!", "?", "؟", "*", "+", "=", "~", "@", "#",
    "$", "%", "^", "&", "|", "\\", "/", "–", "—",
)


def translate_chars(text: str, table: Mapping[str, str]) -> str:
    return "".join(table.get(ch, ch) for ch in text)
