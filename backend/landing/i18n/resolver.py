"""
Text and locale fallback.

Two independent chains live here:

``resolve_text``
    For section config overrides shaped ``{field: scalar | {lang: value}}``.
    Seven steps, applied per field::

        1. map[L]            (non-empty)
        2. map[F]            (non-empty)
        3. map["en"]         (non-empty)
        4. first non-empty map entry, insertion order
        5. legacy scalar, verbatim
        6. ui[ui_key]        (UI string table for L)
        7. default

``resolve_translation``
    For whole-entity tables shaped ``{lang: {field: value}}``. Two steps:
    ``[L][field]`` then ``[F][field]``, else "".

Both are pure: no caching, no I/O.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Mapping, Optional, Tuple

from landing.domain.values import LocalizedMap, Scalar, decode_value

DEFAULT_FALLBACK_LANGUAGE = "es"
ENGLISH = "en"


class ResolutionStep(IntEnum):
    CURRENT_LANGUAGE = 1
    FALLBACK_LANGUAGE = 2
    ENGLISH = 3
    ANY_LANGUAGE = 4
    LEGACY_SCALAR = 5
    UI_STRING = 6
    DEFAULT = 7


def _present(text: Any) -> bool:
    return isinstance(text, str) and text != ""


def ui_string(ui: Optional[Mapping[str, str]], key: Optional[str], default: str = "") -> str:
    """Plain UI-string lookup; empty labels count as missing."""
    if ui and key:
        label = ui.get(key)
        if _present(label):
            return label
    return default


def explain_text(
    value: Any,
    language: str,
    fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ui: Optional[Mapping[str, str]] = None,
    ui_key: Optional[str] = None,
    default: str = "",
) -> Tuple[str, ResolutionStep]:
    """
    Resolve one displayable field and report which step produced it.

    ``value`` may be ``None``, a tagged ``Scalar``/``LocalizedMap``, or the
    raw stored JSON (decoded here).
    """
    tagged = decode_value(value)

    if isinstance(tagged, LocalizedMap):
        current = tagged.get(language)
        if _present(current):
            return current, ResolutionStep.CURRENT_LANGUAGE

        fallback = tagged.get(fallback_language)
        if _present(fallback):
            return fallback, ResolutionStep.FALLBACK_LANGUAGE

        english = tagged.get(ENGLISH)
        if _present(english):
            return english, ResolutionStep.ENGLISH

        for _, text in tagged.items():
            if _present(text):
                return text, ResolutionStep.ANY_LANGUAGE

    elif isinstance(tagged, Scalar):
        if _present(tagged.value):
            return tagged.value, ResolutionStep.LEGACY_SCALAR

    label = ui_string(ui, ui_key)
    if label:
        return label, ResolutionStep.UI_STRING

    return default, ResolutionStep.DEFAULT


def resolve_text(
    value: Any,
    language: str,
    fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ui: Optional[Mapping[str, str]] = None,
    ui_key: Optional[str] = None,
    default: str = "",
) -> str:
    text, _ = explain_text(value, language, fallback_language, ui, ui_key, default)
    return text


def resolve_translation(
    translations: Optional[Mapping[str, Mapping[str, str]]],
    field: str,
    language: str,
    fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
) -> str:
    if not translations or not field:
        return ""

    current = (translations.get(language) or {}).get(field)
    if _present(current):
        return current

    fallback = (translations.get(fallback_language) or {}).get(field)
    if _present(fallback):
        return fallback

    return ""
