"""
Section library model.

Entries are immutable for the lifetime of a deployment. Rows use the same
shape the library table exposes over the API (``available_variants`` and
``customizable_props`` as lists of dicts) so a catalog can be built from
either the bundled defaults or any other row source.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from landing.domain.exceptions import InvariantViolation

PROPERTY_TYPES = frozenset(
    {"text", "textarea", "select", "boolean", "slider", "number", "color", "media"}
)

STANDARD_VARIANT = "standard"


@dataclass(frozen=True)
class VariantInfo:
    variant_key: str
    name: str
    description: str = ""
    # Per-variant default overrides for customizable props
    defaults: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "VariantInfo":
        key = raw.get("variant_key") or raw.get("key")
        if not key:
            raise InvariantViolation(f"Variant without key: {raw!r}")
        return cls(
            variant_key=key,
            name=raw.get("name", key),
            description=raw.get("description", ""),
            defaults=tuple((raw.get("defaults") or {}).items()),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "key": self.variant_key,
            "name": self.name,
            "description": self.description,
        }
        if self.defaults:
            data["defaults"] = dict(self.defaults)
        return data


@dataclass(frozen=True)
class PropertyDescriptor:
    key: str
    label: str
    type: str
    default: Any = None
    options: Tuple[Any, ...] = ()
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    max_length: Optional[int] = None
    accept: Optional[str] = None
    localized: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "PropertyDescriptor":
        prop_type = raw.get("type")
        if prop_type not in PROPERTY_TYPES:
            raise InvariantViolation(f"Unsupported property type '{prop_type}' for '{raw.get('key')}'")
        return cls(
            key=raw["key"],
            label=raw.get("label", raw["key"]),
            type=prop_type,
            default=raw.get("default"),
            options=tuple(raw.get("options") or ()),
            min=raw.get("min"),
            max=raw.get("max"),
            step=raw.get("step"),
            max_length=raw.get("maxLength", raw.get("max_length")),
            accept=raw.get("accept"),
            localized=bool(raw.get("localized", False)),
        )

    @property
    def is_text(self) -> bool:
        return self.type in ("text", "textarea")

    def constraints(self) -> Dict[str, Any]:
        if self.type == "select":
            return {"options": list(self.options)}
        if self.type in ("slider", "number"):
            return {
                name: value
                for name, value in (("min", self.min), ("max", self.max), ("step", self.step))
                if value is not None
            }
        if self.is_text:
            data: Dict[str, Any] = {"localized": self.localized}
            if self.max_length is not None:
                data["maxLength"] = self.max_length
            return data
        if self.type == "media" and self.accept:
            return {"accept": self.accept}
        return {}

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "key": self.key,
            "label": self.label,
            "type": self.type,
            "default": self.default,
        }
        data.update(self.constraints())
        return data


@dataclass(frozen=True)
class SectionLibraryEntry:
    section_key: str
    name: str
    available_variants: Tuple[VariantInfo, ...]
    customizable_props: Tuple[PropertyDescriptor, ...] = ()
    description: str = ""
    category: str = "content"
    icon_name: Optional[str] = None
    display_order: int = 0

    def __post_init__(self):
        if not self.available_variants:
            raise InvariantViolation(f"Section '{self.section_key}' declares no variants")
        keys = [v.variant_key for v in self.available_variants]
        if STANDARD_VARIANT not in keys:
            raise InvariantViolation(f"Section '{self.section_key}' must declare a 'standard' variant")
        if len(set(keys)) != len(keys):
            raise InvariantViolation(f"Section '{self.section_key}' declares duplicate variants")
        prop_keys = [p.key for p in self.customizable_props]
        if len(set(prop_keys)) != len(prop_keys):
            raise InvariantViolation(f"Section '{self.section_key}' declares duplicate properties")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SectionLibraryEntry":
        return cls(
            section_key=raw["section_key"],
            name=raw.get("name", raw["section_key"]),
            description=raw.get("description", ""),
            category=raw.get("category", "content"),
            icon_name=raw.get("icon_name"),
            display_order=int(raw.get("display_order", 0)),
            available_variants=tuple(VariantInfo.from_dict(v) for v in raw.get("available_variants") or ()),
            customizable_props=tuple(PropertyDescriptor.from_dict(p) for p in raw.get("customizable_props") or ()),
        )

    @property
    def variant_keys(self) -> Tuple[str, ...]:
        return tuple(v.variant_key for v in self.available_variants)

    @property
    def first_variant(self) -> str:
        return self.available_variants[0].variant_key

    def has_variant(self, variant: Optional[str]) -> bool:
        return variant in self.variant_keys

    def get_variant(self, variant: str) -> Optional[VariantInfo]:
        for info in self.available_variants:
            if info.variant_key == variant:
                return info
        return None

    def get_prop(self, key: str) -> Optional[PropertyDescriptor]:
        for prop in self.customizable_props:
            if prop.key == key:
                return prop
        return None

    def defaults_for(self, variant: Optional[str] = None) -> Dict[str, Any]:
        """Declared defaults with the variant's overrides applied."""
        values = {prop.key: prop.default for prop in self.customizable_props}
        info = self.get_variant(variant) if variant else None
        if info is not None:
            for key, value in info.defaults:
                if key in values:
                    values[key] = value
        return values

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section_key": self.section_key,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "icon_name": self.icon_name,
            "display_order": self.display_order,
            "available_variants": [v.to_dict() for v in self.available_variants],
            "customizable_props": [p.to_dict() for p in self.customizable_props],
        }


@dataclass(frozen=True)
class Catalog:
    entries: Tuple[SectionLibraryEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        keys = [e.section_key for e in self.entries]
        if len(set(keys)) != len(keys):
            raise InvariantViolation("Section library contains duplicate section keys")

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> "Catalog":
        entries = sorted(
            (SectionLibraryEntry.from_dict(row) for row in rows),
            key=lambda e: e.display_order,
        )
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[SectionLibraryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, section_key: object) -> bool:
        return self.get(section_key) is not None  # type: ignore[arg-type]

    def get(self, section_key: str) -> Optional[SectionLibraryEntry]:
        for entry in self.entries:
            if entry.section_key == section_key:
                return entry
        return None

    def to_list(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]
