"""
Page composition: ordered, active sections -> (renderer, props) pairs.

``compose`` only reads. A section whose key has no catalog entry is logged
and left out without disturbing the order of the others.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from landing.catalog import Catalog
from landing.domain.exceptions import UnregisteredSection
from landing.domain.invariants.section import recover_variant
from landing.i18n import DEFAULT_FALLBACK_LANGUAGE
from landing.rendering import RenderContext, RendererHandle, RendererRegistry, RenderInput
from landing.schema import renderable_fields
from landing.utils.media import media_url
from .text_fields import localize_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposedSection:
    renderer: RendererHandle
    props: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component": self.renderer.component,
            "section_key": self.renderer.section_key,
            "variant": self.renderer.variant,
            "specialized": self.renderer.specialized,
            "props": self.props,
        }


def restaurant_summary(tenant) -> Dict[str, Any]:
    return {
        "id": tenant.id,
        "name": getattr(tenant, "name", None),
        "slug": getattr(tenant, "slug", None),
        "description": getattr(tenant, "description", None),
        "logo_url": getattr(tenant, "logo_url", None),
        "cover_image_url": getattr(tenant, "cover_image_url", None),
        "email": getattr(tenant, "email", None),
        "phone": getattr(tenant, "phone", None),
        "address": getattr(tenant, "address", None),
        "city": getattr(tenant, "city", None),
        "country": getattr(tenant, "country", None),
    }


class PageComposer:
    def __init__(
        self,
        catalog: Catalog,
        store,
        registry: RendererRegistry,
        translations,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
        media_base_url: str = "/media",
    ):
        self.catalog = catalog
        self.store = store
        self.registry = registry
        self.translations = translations
        self.fallback_language = fallback_language
        self.media_base_url = media_base_url

    def build_context(
        self,
        tenant,
        language: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> RenderContext:
        language = language or self.translations.default_language(tenant)
        return RenderContext(
            language=language,
            fallback_language=self.fallback_language,
            ui=self.translations.ui_strings(language),
            translations=self.translations.restaurant_translations(tenant),
            theme=dict(getattr(tenant, "theme", None) or {}),
            restaurant=restaurant_summary(tenant),
            media_base_url=self.media_base_url,
            data=dict(data or {}),
        )

    def compose(
        self,
        tenant,
        language: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> List[ComposedSection]:
        context = self.build_context(tenant, language, data)

        # sorted() is stable: equal order_index keeps insertion order
        sections = sorted(
            (s for s in self.store.list(tenant.id) if s.is_active),
            key=lambda s: s.order_index,
        )

        composed = []
        for section in sections:
            item = self.compose_section(section, context)
            if item is not None:
                composed.append(item)
        return composed

    def compose_section(self, section, context: RenderContext) -> Optional[ComposedSection]:
        entry = self.catalog.get(section.section_key)
        if entry is None:
            error = UnregisteredSection(section.section_key)
            logger.warning("Skipping section %s: %s", section.id, error.message)
            return None

        variant = recover_variant(entry, section.variant)
        handle = self.registry.resolve(section.section_key, variant, entry)
        if handle is None:
            logger.warning("Skipping section %s: no renderer for %s/%s", section.id, section.section_key, variant)
            return None

        raw_config = dict(section.config_data or {})
        texts = localize_fields(entry, raw_config, context)
        variant_defaults = entry.defaults_for(variant)

        config: Dict[str, Any] = {}
        for prop, value in renderable_fields(entry.customizable_props, raw_config):
            if raw_config.get(prop.key) is None:
                value = variant_defaults.get(prop.key, value)
            if prop.is_text:
                value = texts[prop.key]
            elif prop.type == "media":
                value = media_url(value, context.media_base_url)
            config[prop.key] = value

        render_input = RenderInput(
            section_id=section.id,
            section_key=section.section_key,
            variant=variant,
            entry=entry,
            config=config,
            texts=texts,
            raw_config=raw_config,
        )
        try:
            props = handle.build_props(render_input, context)
        except Exception:
            logger.exception("Skipping section %s: renderer %s failed", section.id, handle.component)
            return None
        return ComposedSection(renderer=handle, props=props)
