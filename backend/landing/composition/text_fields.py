"""
Text fields resolved for every section, declared or not.

``title_override`` and ``subtitle_override`` are read by every section
component, so they are localized even when an entry does not declare them.
Their last-resort defaults come from the restaurant or from the built-in
strings below.
"""
from typing import Any, Dict, Mapping

from landing.catalog.entries import SectionLibraryEntry
from landing.i18n import resolve_text, resolve_translation
from landing.rendering.base import RenderContext

WELL_KNOWN_TEXT_FIELDS = {
    "title_override": "fallback_title",
    "subtitle_override": "fallback_subtitle",
}

BUILTIN_TEXT = {
    ("menu", "title_override"): "Our menu",
    ("gallery", "title_override"): "Gallery",
    ("gallery", "subtitle_override"): "Discover our dishes in pictures",
    ("location", "title_override"): "Find us",
    ("location", "subtitle_override"): "Come visit us",
    ("contact", "title_override"): "Ready for a unique experience?",
    ("contact", "subtitle_override"): "Book your table now",
    ("hero", "cta_text"): "See the menu",
}


def ui_key_for(section_key: str, field: str) -> str:
    suffix = WELL_KNOWN_TEXT_FIELDS.get(field, field)
    return f"{section_key}_{suffix}"


def hardcoded_default(entry: SectionLibraryEntry, field: str, context: RenderContext) -> str:
    restaurant = context.restaurant
    if field == "title_override" and entry.section_key in ("hero", "about"):
        return restaurant.get("name") or ""
    if field == "subtitle_override" and entry.section_key == "hero":
        return resolve_translation(
            context.translations, "short_description", context.language, context.fallback_language
        ) or restaurant.get("description") or ""

    builtin = BUILTIN_TEXT.get((entry.section_key, field))
    if builtin is not None:
        return builtin

    prop = entry.get_prop(field)
    if prop is not None and isinstance(prop.default, str):
        return prop.default
    return ""


def localize_fields(
    entry: SectionLibraryEntry,
    config_data: Mapping[str, Any],
    context: RenderContext,
) -> Dict[str, str]:
    """Run the text chain independently for each text field of the section."""
    fields = [prop.key for prop in entry.customizable_props if prop.is_text]
    fields += [key for key in WELL_KNOWN_TEXT_FIELDS if key not in fields]

    return {
        field: resolve_text(
            config_data.get(field),
            context.language,
            context.fallback_language,
            ui=context.ui,
            ui_key=ui_key_for(entry.section_key, field),
            default=hardcoded_default(entry, field, context),
        )
        for field in fields
    }
