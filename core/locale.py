# core/locale.py

from models.enums import Language


RTL_LANGUAGES = {Language.ar}


def parse_language(value, default: Language = Language.en) -> Language:
    try:
        return Language(value)
    except ValueError:
        return default


def direction(language: Language) -> str:
    return "rtl" if language in RTL_LANGUAGES else "ltr"


def toggle(language: Language) -> Language:
    return Language.ar if language is Language.en else Language.en


def describe(language: Language) -> dict:
    """Payload a client needs to switch language: code + text direction."""
    return {"language": language.value, "dir": direction(language)}
