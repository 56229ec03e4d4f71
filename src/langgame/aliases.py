"""
Static table of dictionary codes and the language names shown to players.

Codes are the lowercase directory names used by the LibreOffice dictionaries
corpus (``fr``, ``pt``, ``sr-latn``, ...). Several codes may share one display
name. The table is built once at import and cannot be modified.
"""

from types import MappingProxyType
from typing import Mapping

LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType({
    "af": "Afrikaans",
    "an": "Aragonese",
    "ar": "Arabic",
    "as": "Assamese",
    "be": "Belarusian",
    "be-official": "Belarusian",
    "bg": "Bulgarian",
    "bn": "Nepali",
    "bo": "Tibetan",
    "br": "Breton",
    "bs": "Bosnian",
    "ca": "Catalan",
    "ca-valencia": "Valencian",
    "ckb": "Kurdish",
    "cs": "Czech",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "eo": "esperanto",
    "es": "Spanish",
    "et": "Estonian",
    "fa": "Persian",
    "fa-ir": "Persian",
    "fr": "French",
    "gd": "Scottish Gaelic",
    "gl": "Galician",
    "gu": "Bengali",
    "gug": "Guarani",
    "he": "Hebrew",
    "hi": "Hindi",
    "hr": "Croatian",
    "hu": "Hungarian",
    "id": "Indonesian",
    "in": "Indonesian",
    "is": "Icelandic",
    "it": "Italian",
    "kmr": "Kurdish",
    "kn": "Kannada",
    "ko": "Korean",
    "ku": "Kurdish",
    "lo": "Laotian",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "md": "Mapudüngun",
    "mn": "Mongolian",
    "mr": "Marathi",
    "nb": "Norwegian",
    "ne": "Nepali",
    "nl": "Dutch",
    "nn": "Norwegian",
    "no": "Norwegian",
    "oc": "Occitan",
    "or": "Oriya",
    "pa": "Punjabi",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sa": "Sanskrit",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "sq": "Albanian",
    "sr": "Serbian",
    "sr-latn": "Serbian",
    "sv": "Swedish",
    "sw": "Swahili",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "vi": "Vietnamese",
})


def resolve_display_name(code: str, base: str) -> str | None:
    """
    Look up the display name for a bundle.

    The full code wins (``ca-valencia`` -> Valencian); otherwise the base code
    is tried (``pt_br`` -> ``pt`` -> Portuguese).

    Args:
        code: Lowercase bundle code
        base: Lowercase code with any ``_`` suffix removed

    Returns:
        The display name, or None if neither key is known
    """
    return LANGUAGE_ALIASES.get(code) or LANGUAGE_ALIASES.get(base)


__all__ = ["LANGUAGE_ALIASES", "resolve_display_name"]
