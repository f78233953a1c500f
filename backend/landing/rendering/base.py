from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from landing.catalog.entries import SectionLibraryEntry


@dataclass(frozen=True)
class RenderContext:
    """Page-wide data handed to every renderer. Opaque to the composer."""
    language: str
    fallback_language: str = "es"
    ui: Mapping[str, str] = field(default_factory=dict)
    translations: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    theme: Mapping[str, Any] = field(default_factory=dict)
    restaurant: Mapping[str, Any] = field(default_factory=dict)
    media_base_url: str = "/media"
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderInput:
    """One resolved section instance."""
    section_id: str
    section_key: str
    variant: str
    entry: SectionLibraryEntry
    # Declared props only, text localized and media resolved
    config: Mapping[str, Any]
    # Localized text for declared and well-known text fields
    texts: Mapping[str, str]
    # Stored config_data untouched, undeclared keys included
    raw_config: Mapping[str, Any]


PropsBuilder = Callable[[RenderInput, RenderContext], Dict[str, Any]]


@dataclass(frozen=True)
class RendererHandle:
    component: str
    section_key: str
    variant: str
    specialized: bool
    builder: PropsBuilder

    def build_props(self, section: RenderInput, context: RenderContext) -> Dict[str, Any]:
        props: Dict[str, Any] = {
            "id": section.section_id,
            "section_key": section.section_key,
            "variant": section.variant,
            "config": dict(section.config),
            "texts": dict(section.texts),
            "theme": dict(context.theme),
            "currentLanguage": context.language,
            "ui": dict(context.ui),
        }
        props.update(self.builder(section, context))
        return props


RendererFactory = Callable[[Optional[SectionLibraryEntry], str, str], RendererHandle]
