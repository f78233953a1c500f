"""
Variant component resolution.

The registry is an explicit map built at startup and stored on the Flask app;
tests build their own and register fakes.
"""
import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

from landing.catalog.entries import SectionLibraryEntry
from .base import RendererFactory, RendererHandle
from .generic import generic_renderer

logger = logging.getLogger(__name__)

RendererKey = Tuple[str, str]


class RendererRegistry:
    def __init__(
        self,
        factories: Optional[Mapping[RendererKey, RendererFactory]] = None,
        generic_factory: Optional[RendererFactory] = generic_renderer,
    ):
        self._factories: Dict[RendererKey, RendererFactory] = dict(factories or {})
        self.generic_factory = generic_factory

    def register(self, section_key: str, variant: str, factory: RendererFactory) -> None:
        self._factories[(section_key, variant)] = factory

    def unregister(self, section_key: str, variant: str) -> None:
        self._factories.pop((section_key, variant), None)

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __iter__(self) -> Iterator[RendererKey]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def resolve(
        self,
        section_key: str,
        variant: str,
        entry: Optional[SectionLibraryEntry] = None,
    ) -> Optional[RendererHandle]:
        """
        Specialized renderer for (section_key, variant), else the generic one
        bound to ``entry``. ``None`` only when neither applies.
        """
        factory = self._factories.get((section_key, variant))
        if factory is not None:
            return factory(entry, section_key, variant)

        if entry is not None and self.generic_factory is not None:
            logger.debug("No renderer for %s/%s; using schema renderer", section_key, variant)
            return self.generic_factory(entry, section_key, variant)

        return None


def build_default_registry() -> RendererRegistry:
    from .sections import SPECIALIZED_RENDERERS

    registry = RendererRegistry()
    for (section_key, variant), factory in SPECIALIZED_RENDERERS.items():
        registry.register(section_key, variant, factory)
    return registry
