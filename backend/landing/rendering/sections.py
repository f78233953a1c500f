"""
Specialized renderers for section variants with a dedicated component.

Each builder derives the component's extra props from the resolved section
and the page context. Variants without an entry here use the schema renderer.
"""
from typing import Any, Dict, List, Mapping, Optional

from landing.catalog.entries import SectionLibraryEntry
from landing.i18n import resolve_translation
from landing.utils.media import media_url
from .base import RenderContext, RendererHandle, RenderInput

PATTERN_SIZE = 160
PATTERN_OPACITY = 0.12
PATTERN_BLEND_MODE = "soft-light"


def _restaurant(context: RenderContext) -> Dict[str, Any]:
    return dict(context.restaurant)


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _hero(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    restaurant = _restaurant(context)
    background = section.config.get("background_media") or media_url(
        restaurant.get("cover_image_url"), context.media_base_url
    )
    return {
        "restaurant": restaurant,
        "title": section.texts.get("title_override"),
        "subtitle": section.texts.get("subtitle_override"),
        "cta_text": section.texts.get("cta_text"),
        "background_url": background,
    }


def _slide(raw: Any, title: Optional[str], context: RenderContext) -> Optional[Dict[str, Any]]:
    """A configured slide as {url, alt}, or None when it carries no usable URL."""
    url = raw.get("url") if isinstance(raw, Mapping) else raw
    if not isinstance(url, str) or not url:
        return None
    alt = raw.get("alt") if isinstance(raw, Mapping) else None
    return {"url": media_url(url, context.media_base_url), "alt": alt or title}


def _hero_premium(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    props = _hero(section, context)
    raw = section.raw_config
    restaurant_media = context.data.get("restaurant_media") or {}
    assets = context.data.get("assets") or {}

    raw_slides = raw.get("slides") if isinstance(raw.get("slides"), list) else []
    configured = [
        slide for slide in (_slide(s, props["title"], context) for s in raw_slides) if slide is not None
    ]

    if configured:
        slides = configured
    elif restaurant_media.get("hero_slides"):
        slides = [
            {"url": s.get("image_url"), "alt": s.get("alt") or props["title"]}
            for s in restaurant_media["hero_slides"]
        ]
    else:
        slides = [{"url": props["background_url"], "alt": props["title"]}]

    props.update(
        slides=slides,
        autoplay_ms=section.config.get("autoplay_ms", 0),
        pattern={
            "url": raw.get("pattern_url") or raw.get("background_pattern_url") or assets.get("landing_pattern_url") or "",
            "size": _as_int(raw.get("pattern_size"), PATTERN_SIZE),
            "opacity": raw.get("pattern_opacity", PATTERN_OPACITY),
            "blend_mode": raw.get("pattern_blend_mode") or PATTERN_BLEND_MODE,
        },
    )
    return props


def _about(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    description = section.texts.get("description_override") or resolve_translation(
        context.translations, "description", context.language, context.fallback_language
    ) or _restaurant(context).get("description") or ""
    return {
        "title": section.texts.get("title_override"),
        "description": description,
        "images": list((context.data.get("restaurant_media") or {}).get("about_images") or []),
    }


def _menu(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    limit = _as_int(section.config.get("max_items"), 8)
    return {
        "title": section.texts.get("title_override"),
        "subtitle": section.texts.get("subtitle_override"),
        "dishes": list(context.data.get("menu_preview") or [])[:limit],
    }


def _menu_premium(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    props = _menu(section, context)
    config = section.config
    menus = list(context.data.get("menus") or [])

    if (config.get("premium_videos_source") or "from_menus") == "from_menus":
        videos = [
            {
                "src": m.get("featured_video_url"),
                "poster": m.get("featured_poster_url"),
                "href": m.get("external_url"),
                "title": m.get("name"),
                "hasVideo": bool(m.get("featured_video_url")),
            }
            for m in menus
        ]
    else:
        videos = list(section.raw_config.get("premium_manual_videos") or [])

    props["premium"] = {
        "title": section.texts.get("title_override") or None,
        "menus": menus,
        "videos": videos,
        "per_page": {
            "desktop": _as_int(config.get("premium_per_page_desktop"), 3),
            "tablet": _as_int(config.get("premium_per_page_tablet"), 2),
            "mobile": _as_int(config.get("premium_per_page_mobile"), 1),
        },
        "autoplay_on_hover": config.get("premium_autoplay_on_hover") is not False,
        "loop": config.get("premium_loop") is not False,
        "show_dots": config.get("premium_show_dots") is not False,
    }
    return props


def _gallery(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    limit = _as_int(section.config.get("max_images"), 12)
    images: List[Mapping[str, Any]] = list(context.data.get("gallery") or [])
    if section.raw_config.get("filter_by_featured"):
        images = [image for image in images if image.get("is_featured")]
    return {
        "title": section.texts.get("title_override"),
        "subtitle": section.texts.get("subtitle_override"),
        "images": images[:limit],
    }


def _location(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    restaurant = _restaurant(context)
    details = context.data.get("details") or {}
    return {
        "title": section.texts.get("title_override"),
        "subtitle": section.texts.get("subtitle_override"),
        "address": restaurant.get("address"),
        "city": restaurant.get("city"),
        "country": restaurant.get("country"),
        "opening_hours": details.get("opening_hours") if section.config.get("show_hours", True) else None,
    }


def _contact(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    restaurant = _restaurant(context)
    return {
        "title": section.texts.get("title_override"),
        "subtitle": section.texts.get("subtitle_override"),
        "email": restaurant.get("email"),
        "phone": restaurant.get("phone"),
        "show_newsletter": bool(section.config.get("show_newsletter")),
    }


def _header_premium(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    restaurant = _restaurant(context)
    return {
        "restaurant_name": restaurant.get("name"),
        "logo_url": media_url(restaurant.get("logo_url"), context.media_base_url)
        if section.config.get("show_logo", True) else None,
        "languages": list(context.data.get("languages") or []),
        "max_width": section.raw_config.get("max_width") or "1400px",
    }


def _specialized(component: str, builder):
    def factory(entry: Optional[SectionLibraryEntry], section_key: str, variant: str) -> RendererHandle:
        return RendererHandle(
            component=component,
            section_key=section_key,
            variant=variant,
            specialized=True,
            builder=builder,
        )
    return factory


SPECIALIZED_RENDERERS = {
    ("hero", "standard"): _specialized("HeroSection", _hero),
    ("hero", "premium"): _specialized("HeroPremiumSection", _hero_premium),
    ("about", "standard"): _specialized("AboutSection", _about),
    ("about", "premium"): _specialized("AboutPremiumSection", _about),
    ("menu", "standard"): _specialized("MenuSection", _menu),
    ("menu", "premium"): _specialized("MenuSectionPremium", _menu_premium),
    ("gallery", "standard"): _specialized("GallerySection", _gallery),
    ("gallery", "premium"): _specialized("GalleryPremiumSection", _gallery),
    ("location", "standard"): _specialized("LocationSection", _location),
    ("contact", "standard"): _specialized("ContactSection", _contact),
    ("contact", "premium"): _specialized("ContactPremiumSection", _contact),
    ("header", "premium"): _specialized("HeaderPremiumSection", _header_premium),
}
