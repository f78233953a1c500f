from .base import RenderContext, RendererHandle, RenderInput
from .generic import generic_renderer
from .registry import RendererRegistry, build_default_registry

__all__ = [
    "RenderContext",
    "RendererHandle",
    "RenderInput",
    "generic_renderer",
    "RendererRegistry",
    "build_default_registry",
]
