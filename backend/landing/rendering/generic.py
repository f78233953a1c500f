from typing import Any, Dict, Optional

from landing.catalog.entries import SectionLibraryEntry
from .base import RenderContext, RendererHandle, RenderInput

GENERIC_COMPONENT = "SchemaSection"


def _schema_fields(section: RenderInput, context: RenderContext) -> Dict[str, Any]:
    # Only declared props reach the generic renderer; section.config holds
    # nothing else.
    return {
        "fields": [
            {"key": prop.key, "type": prop.type, "label": prop.label, "value": section.config.get(prop.key)}
            for prop in section.entry.customizable_props
        ],
    }


def generic_renderer(
    entry: Optional[SectionLibraryEntry], section_key: str, variant: str
) -> RendererHandle:
    """Schema-driven fallback bound to the entry's customizable props."""
    return RendererHandle(
        component=GENERIC_COMPONENT,
        section_key=section_key,
        variant=variant,
        specialized=False,
        builder=_schema_fields,
    )
