from .engine import (
    NO_CUSTOMIZATION_MESSAGE,
    EditForm,
    FieldContract,
    apply_patch,
    build_form,
    contract_for,
    defaults,
    normalize_value,
    renderable_fields,
    set_value,
)

__all__ = [
    "NO_CUSTOMIZATION_MESSAGE",
    "EditForm",
    "FieldContract",
    "apply_patch",
    "build_form",
    "contract_for",
    "defaults",
    "normalize_value",
    "renderable_fields",
    "set_value",
]
