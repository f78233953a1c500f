from .resolver import (
    DEFAULT_FALLBACK_LANGUAGE,
    ResolutionStep,
    explain_text,
    resolve_text,
    resolve_translation,
    ui_string,
)

__all__ = [
    "DEFAULT_FALLBACK_LANGUAGE",
    "ResolutionStep",
    "explain_text",
    "resolve_text",
    "resolve_translation",
    "ui_string",
]
