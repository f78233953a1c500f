"""
Bundled section library.

Rows mirror the ``landing_section_library`` records served by the admin API.
"""
from functools import lru_cache

from .entries import Catalog

_TITLE = {"key": "title_override", "label": "Title", "type": "text", "default": None, "maxLength": 80, "localized": True}
_SUBTITLE = {"key": "subtitle_override", "label": "Subtitle", "type": "textarea", "default": None, "maxLength": 240, "localized": True}

DEFAULT_LIBRARY = [
    {
        "section_key": "header",
        "name": "Header",
        "description": "Top navigation bar with logo and language selector",
        "category": "navigation",
        "icon_name": "ViewHeadline",
        "display_order": 0,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Solid bar"},
            {"variant_key": "premium", "name": "Premium", "description": "Glass bar with centered logo",
             "defaults": {"style": "glass"}},
        ],
        "customizable_props": [
            {"key": "style", "label": "Style", "type": "select", "default": "solid", "options": ["solid", "glass", "transparent"]},
            {"key": "sticky", "label": "Sticky", "type": "boolean", "default": True},
            {"key": "show_logo", "label": "Show logo", "type": "boolean", "default": True},
            {"key": "show_title", "label": "Show title", "type": "boolean", "default": True},
            {"key": "logo_size", "label": "Logo size", "type": "slider", "default": 0.3, "min": 0.1, "max": 0.5, "step": 0.05},
        ],
    },
    {
        "section_key": "hero",
        "name": "Hero",
        "description": "Main banner with the restaurant name and call to action",
        "category": "header",
        "icon_name": "Home",
        "display_order": 1,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Full-width cover image"},
            {"variant_key": "premium", "name": "Premium", "description": "Arched slideshow over a brand pattern",
             "defaults": {"height": "50vh"}},
            {"variant_key": "split", "name": "Split", "description": "Text and image side by side"},
            {"variant_key": "video", "name": "Video", "description": "Background video"},
        ],
        "customizable_props": [
            _TITLE,
            _SUBTITLE,
            {"key": "cta_text", "label": "Button text", "type": "text", "default": None, "maxLength": 30, "localized": True},
            {"key": "height", "label": "Height", "type": "select", "default": "100vh", "options": ["50vh", "75vh", "100vh"]},
            {"key": "text_align", "label": "Text alignment", "type": "select", "default": "center", "options": ["left", "center", "right"]},
            {"key": "background_media", "label": "Background", "type": "media", "default": None, "accept": "image/*,video/*"},
            {"key": "overlay_color", "label": "Overlay color", "type": "color", "default": "#000000"},
            {"key": "overlay_opacity", "label": "Overlay opacity", "type": "slider", "default": 0.4, "min": 0, "max": 1, "step": 0.1},
            {"key": "autoplay_ms", "label": "Slide interval (ms)", "type": "number", "default": 0, "min": 0, "max": 20000, "step": 500},
            {"key": "show_scroll_indicator", "label": "Scroll indicator", "type": "boolean", "default": True},
        ],
    },
    {
        "section_key": "about",
        "name": "About",
        "description": "Story of the restaurant",
        "category": "content",
        "icon_name": "Info",
        "display_order": 2,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Text with side image"},
            {"variant_key": "premium", "name": "Premium", "description": "Parallax image collage"},
        ],
        "customizable_props": [
            _TITLE,
            {"key": "description_override", "label": "Description", "type": "textarea", "default": None, "maxLength": 1200, "localized": True},
            {"key": "image_position", "label": "Image position", "type": "select", "default": "right", "options": ["left", "right"]},
            {"key": "show_subtitle", "label": "Show subtitle", "type": "boolean", "default": True},
            {"key": "section_padding", "label": "Padding (px)", "type": "number", "default": 64, "min": 0, "max": 200, "step": 8},
        ],
    },
    {
        "section_key": "menu",
        "name": "Menu",
        "description": "Featured dishes or menu carousel",
        "category": "content",
        "icon_name": "RestaurantMenu",
        "display_order": 3,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Featured dishes grid"},
            {"variant_key": "premium", "name": "Premium", "description": "Menu video carousel",
             "defaults": {"max_items": 6}},
        ],
        "customizable_props": [
            _TITLE,
            _SUBTITLE,
            {"key": "max_items", "label": "Dishes shown", "type": "slider", "default": 8, "min": 2, "max": 12, "step": 1},
            {"key": "premium_videos_source", "label": "Video source", "type": "select", "default": "from_menus", "options": ["from_menus", "manual"]},
            {"key": "premium_per_page_desktop", "label": "Cards per page (desktop)", "type": "number", "default": 3, "min": 1, "max": 6, "step": 1},
            {"key": "premium_per_page_tablet", "label": "Cards per page (tablet)", "type": "number", "default": 2, "min": 1, "max": 4, "step": 1},
            {"key": "premium_per_page_mobile", "label": "Cards per page (mobile)", "type": "number", "default": 1, "min": 1, "max": 2, "step": 1},
            {"key": "premium_autoplay_on_hover", "label": "Autoplay on hover", "type": "boolean", "default": True},
            {"key": "premium_loop", "label": "Loop", "type": "boolean", "default": True},
            {"key": "premium_show_dots", "label": "Show dots", "type": "boolean", "default": True},
        ],
    },
    {
        "section_key": "gallery",
        "name": "Gallery",
        "description": "Photo gallery",
        "category": "media",
        "icon_name": "PhotoLibrary",
        "display_order": 4,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Uniform grid"},
            {"variant_key": "premium", "name": "Premium", "description": "Lightbox grid with captions"},
            {"variant_key": "masonry", "name": "Masonry", "description": "Staggered columns"},
        ],
        "customizable_props": [
            _TITLE,
            _SUBTITLE,
            {"key": "columns", "label": "Columns", "type": "slider", "default": 3, "min": 1, "max": 6, "step": 1},
            {"key": "gap", "label": "Gap (px)", "type": "number", "default": 12, "min": 0, "max": 48, "step": 2},
            {"key": "max_images", "label": "Max images", "type": "number", "default": 12, "min": 1, "max": 48, "step": 1},
            {"key": "aspect_ratio", "label": "Aspect ratio", "type": "select", "default": "1:1", "options": ["1:1", "4:3", "16:9"]},
            {"key": "show_captions", "label": "Show captions", "type": "boolean", "default": False},
            {"key": "lightbox_enabled", "label": "Lightbox", "type": "boolean", "default": True},
        ],
    },
    {
        "section_key": "location",
        "name": "Location",
        "description": "Address, opening hours and map",
        "category": "info",
        "icon_name": "LocationOn",
        "display_order": 5,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Map with details card"},
            {"variant_key": "map_only", "name": "Map only", "description": "Full-width map"},
        ],
        "customizable_props": [
            _TITLE,
            _SUBTITLE,
            {"key": "show_hours", "label": "Show opening hours", "type": "boolean", "default": True},
            {"key": "map_zoom", "label": "Map zoom", "type": "slider", "default": 15, "min": 10, "max": 20, "step": 1},
        ],
    },
    {
        "section_key": "contact",
        "name": "Contact",
        "description": "Reservation call to action and contact details",
        "category": "info",
        "icon_name": "ContactMail",
        "display_order": 6,
        "available_variants": [
            {"variant_key": "standard", "name": "Standard", "description": "Call to action banner"},
            {"variant_key": "premium", "name": "Premium", "description": "Footer with newsletter",
             "defaults": {"show_newsletter": True}},
        ],
        "customizable_props": [
            _TITLE,
            _SUBTITLE,
            {"key": "show_newsletter", "label": "Newsletter signup", "type": "boolean", "default": False},
            {"key": "accent_color", "label": "Accent color", "type": "color", "default": "#D6AA52"},
        ],
    },
]


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The deployment catalog; read-only, so cached for the process lifetime."""
    return Catalog.from_rows(DEFAULT_LIBRARY)
