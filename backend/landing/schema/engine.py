"""
Schema-driven configuration of section instances.

Every function is pure: ``config_data`` dicts are copied, never mutated, so a
rejected value always leaves the caller's previous data intact.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from landing.catalog.entries import PropertyDescriptor, SectionLibraryEntry
from landing.domain.exceptions import ValidationRejected

NO_CUSTOMIZATION_MESSAGE = "No customization available for this section"

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off", ""}

# type -> (widget, expected value shape)
WIDGETS: Dict[str, Tuple[str, str]] = {
    "text": ("text_field", "string"),
    "textarea": ("multiline_text_field", "string"),
    "select": ("select", "one_of_options"),
    "boolean": ("switch", "boolean"),
    "slider": ("slider", "number"),
    "number": ("number_field", "number"),
    "color": ("color_picker", "hex_color"),
    "media": ("media_picker", "reference"),
}

MEDIA_ACCEPT_EXTENSIONS = {
    "image": {"png", "jpg", "jpeg", "gif", "webp", "svg", "avif"},
    "video": {"mp4", "mov", "avi", "webm"},
}


@dataclass(frozen=True)
class FieldContract:
    key: str
    label: str
    type: str
    widget: str
    value_shape: str
    default: Any
    constraints: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "type": self.type,
            "widget": self.widget,
            "value_shape": self.value_shape,
            "default": self.default,
            "constraints": dict(self.constraints),
        }


@dataclass(frozen=True)
class EditForm:
    section_key: str
    variant: Optional[str]
    available: bool
    fields: Tuple[Tuple[FieldContract, Any], ...] = ()
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "section_key": self.section_key,
            "variant": self.variant,
            "available": self.available,
        }
        if not self.available:
            data["message"] = self.message
            return data
        data["fields"] = [
            {**contract.to_dict(), "value": value} for contract, value in self.fields
        ]
        return data


def contract_for(descriptor: PropertyDescriptor) -> FieldContract:
    widget, shape = WIDGETS[descriptor.type]
    if descriptor.is_text and descriptor.localized:
        shape = "string_or_language_map"
    return FieldContract(
        key=descriptor.key,
        label=descriptor.label,
        type=descriptor.type,
        widget=widget,
        value_shape=shape,
        default=descriptor.default,
        constraints=descriptor.constraints(),
    )


def defaults(
    props: Sequence[PropertyDescriptor],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    values = {prop.key: prop.default for prop in props}
    for key, value in (overrides or {}).items():
        if key in values:
            values[key] = value
    return values


def renderable_fields(
    props: Sequence[PropertyDescriptor],
    config_data: Optional[Mapping[str, Any]],
) -> List[Tuple[PropertyDescriptor, Any]]:
    """Declared props paired with their stored value, or the declared default."""
    config_data = config_data or {}
    fields = []
    for prop in props:
        current = config_data.get(prop.key)
        fields.append((prop, prop.default if current is None else current))
    return fields


def build_form(
    entry: SectionLibraryEntry,
    config_data: Optional[Mapping[str, Any]],
    variant: Optional[str] = None,
) -> EditForm:
    if not entry.customizable_props:
        return EditForm(
            section_key=entry.section_key,
            variant=variant,
            available=False,
            message=NO_CUSTOMIZATION_MESSAGE,
        )

    variant_defaults = entry.defaults_for(variant)
    fields = []
    for prop, value in renderable_fields(entry.customizable_props, config_data):
        contract = contract_for(prop)
        if prop.key in variant_defaults and (config_data or {}).get(prop.key) is None:
            value = variant_defaults[prop.key]
        fields.append((contract, value))

    return EditForm(
        section_key=entry.section_key,
        variant=variant,
        available=True,
        fields=tuple(fields),
    )


# ---------------------------------------------------------------------------
# Per-type normalization
# ---------------------------------------------------------------------------

def _to_decimal(descriptor: PropertyDescriptor, raw: Any) -> Decimal:
    if isinstance(raw, bool):
        raise ValidationRejected(descriptor.key, "expected a number")
    try:
        return Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        raise ValidationRejected(descriptor.key, f"expected a number, got {raw!r}")


def _is_integral(value: Optional[float]) -> bool:
    return value is None or float(value).is_integer()


def _normalize_number(descriptor: PropertyDescriptor, raw: Any):
    value = _to_decimal(descriptor, raw)
    if not value.is_finite():
        raise ValidationRejected(descriptor.key, "expected a finite number")

    lower = Decimal(str(descriptor.min)) if descriptor.min is not None else None
    upper = Decimal(str(descriptor.max)) if descriptor.max is not None else None

    if lower is not None and value < lower:
        value = lower
    if upper is not None and value > upper:
        value = upper

    if descriptor.step:
        step = Decimal(str(descriptor.step))
        origin = lower if lower is not None else Decimal(0)
        steps = ((value - origin) / step).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        value = origin + steps * step
        # A max that is off the step grid snaps down to the last grid point.
        if upper is not None and value > upper:
            value -= step

    if all(_is_integral(v) for v in (descriptor.min, descriptor.max, descriptor.step)) and value == value.to_integral_value():
        return int(value)
    return float(value)


def _normalize_text(descriptor: PropertyDescriptor, raw: Any) -> str:
    text = "" if raw is None else str(raw)
    if descriptor.max_length is not None:
        text = text[: descriptor.max_length]
    return text


def _normalize_boolean(raw: Any) -> bool:
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return bool(raw)


def _media_accepts(accept: str, reference: str) -> bool:
    path = reference.split("?", 1)[0].split("#", 1)[0]
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return True  # opaque asset key, nothing to check
    ext = name.rsplit(".", 1)[1].lower()
    for token in (t.strip().lower() for t in accept.split(",")):
        if not token:
            continue
        if token.startswith("."):
            if token[1:] == ext:
                return True
        elif token.endswith("/*"):
            if ext in MEDIA_ACCEPT_EXTENSIONS.get(token[:-2], set()):
                return True
        elif token.split("/")[-1] == ext:
            return True
    return False


def _normalize_media(descriptor: PropertyDescriptor, raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValidationRejected(descriptor.key, "expected a media reference string")
    reference = raw.strip()
    if reference and descriptor.accept and not _media_accepts(descriptor.accept, reference):
        raise ValidationRejected(descriptor.key, f"media type not accepted ({descriptor.accept})")
    return reference


def normalize_value(descriptor: PropertyDescriptor, raw: Any) -> Any:
    """Validate ``raw`` against ``descriptor`` and return the storable value."""
    prop_type = descriptor.type

    if prop_type in ("text", "textarea"):
        return _normalize_text(descriptor, raw)

    if prop_type == "select":
        if raw not in descriptor.options:
            raise ValidationRejected(
                descriptor.key, f"{raw!r} is not one of {list(descriptor.options)}"
            )
        return raw

    if prop_type == "boolean":
        return _normalize_boolean(raw)

    if prop_type in ("slider", "number"):
        return _normalize_number(descriptor, raw)

    if prop_type == "color":
        if not isinstance(raw, str) or not HEX_COLOR.match(raw.strip()):
            raise ValidationRejected(descriptor.key, f"{raw!r} is not a hex color")
        return raw.strip()

    if prop_type == "media":
        return _normalize_media(descriptor, raw)

    raise ValidationRejected(descriptor.key, f"unsupported type '{prop_type}'")


def _find(props: Sequence[PropertyDescriptor], key: str) -> Optional[PropertyDescriptor]:
    for prop in props:
        if prop.key == key:
            return prop
    return None


def _merge_localized(descriptor: PropertyDescriptor, existing: Any, raw: Mapping[str, Any]) -> Dict[str, str]:
    merged: Dict[str, str] = dict(existing) if isinstance(existing, Mapping) else {}
    for lang, text in raw.items():
        merged[str(lang)] = _normalize_text(descriptor, text)
    return merged


def set_value(
    props: Sequence[PropertyDescriptor],
    config_data: Optional[Mapping[str, Any]],
    key: str,
    raw_value: Any,
    language: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Return a copy of ``config_data`` with ``key`` set to the validated value.

    Text fields are truncated at ``max_length``. For localized text fields a
    ``language`` (or a ``{lang: text}`` value) writes into the per-language
    map and keeps the other languages. A legacy scalar already stored under
    that key is replaced by the map.
    """
    descriptor = _find(props, key)
    if descriptor is None:
        raise ValidationRejected(key, "not a customizable property of this section")

    updated = dict(config_data or {})
    existing = updated.get(key)

    if descriptor.is_text and isinstance(raw_value, Mapping):
        if not descriptor.localized:
            raise ValidationRejected(key, "field does not accept per-language values")
        updated[key] = _merge_localized(descriptor, existing, raw_value)
        return updated

    if descriptor.is_text and language:
        if not descriptor.localized:
            raise ValidationRejected(key, "field does not accept per-language values")
        updated[key] = _merge_localized(descriptor, existing, {language: raw_value})
        return updated

    updated[key] = normalize_value(descriptor, raw_value)
    return updated


def apply_patch(
    props: Sequence[PropertyDescriptor],
    config_data: Optional[Mapping[str, Any]],
    patch: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Merge ``patch`` into ``config_data`` key by key.

    Declared keys go through ``set_value``; undeclared keys are kept as given
    so newer clients can store data older renderers ignore.
    """
    updated = dict(config_data or {})
    for key, raw in (patch or {}).items():
        if _find(props, key) is None:
            updated[key] = raw
        elif raw is None:
            updated.pop(key, None)
        else:
            updated = set_value(props, updated, key, raw)
    return updated
