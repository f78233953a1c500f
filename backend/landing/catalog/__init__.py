from .entries import (
    PROPERTY_TYPES,
    Catalog,
    PropertyDescriptor,
    SectionLibraryEntry,
    VariantInfo,
)
from .library import DEFAULT_LIBRARY, default_catalog

__all__ = [
    "PROPERTY_TYPES",
    "Catalog",
    "PropertyDescriptor",
    "SectionLibraryEntry",
    "VariantInfo",
    "DEFAULT_LIBRARY",
    "default_catalog",
]
