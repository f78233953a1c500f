"""Tests for form building and per-type value normalization."""
import pytest

from landing.catalog import default_catalog
from landing.catalog.entries import PropertyDescriptor, SectionLibraryEntry, VariantInfo
from landing.domain.exceptions import ValidationRejected
from landing.schema import (
    NO_CUSTOMIZATION_MESSAGE,
    apply_patch,
    build_form,
    contract_for,
    defaults,
    renderable_fields,
    set_value,
)


LOGO_SIZE = PropertyDescriptor(key="logo_size", label="Logo size", type="slider",
                               default=0.3, min=0.1, max=0.5, step=0.05)
HEIGHT = PropertyDescriptor(key="height", label="Height", type="select",
                            default="100vh", options=("50vh", "75vh", "100vh"))
TITLE = PropertyDescriptor(key="title_override", label="Title", type="text",
                           max_length=10, localized=True)
NOTE = PropertyDescriptor(key="note", label="Note", type="textarea", max_length=5)
STICKY = PropertyDescriptor(key="sticky", label="Sticky", type="boolean", default=True)
ACCENT = PropertyDescriptor(key="accent", label="Accent", type="color", default="#000000")
COLUMNS = PropertyDescriptor(key="columns", label="Columns", type="slider", default=3, min=1, max=6, step=1)
BACKGROUND = PropertyDescriptor(key="background", label="Background", type="media", accept="image/*")

PROPS = (LOGO_SIZE, HEIGHT, TITLE, NOTE, STICKY, ACCENT, COLUMNS, BACKGROUND)


class TestNumbers:
    def test_slider_snaps_to_step_relative_to_min(self):
        assert set_value(PROPS, {}, "logo_size", 0.37)["logo_size"] == pytest.approx(0.35)

    def test_slider_clamps_to_max(self):
        assert set_value(PROPS, {}, "logo_size", 0.9)["logo_size"] == pytest.approx(0.5)

    def test_slider_clamps_to_min(self):
        assert set_value(PROPS, {}, "logo_size", -3)["logo_size"] == pytest.approx(0.1)

    def test_numeric_strings_are_coerced(self):
        assert set_value(PROPS, {}, "columns", "4.6")["columns"] == 5

    def test_integral_grid_keeps_ints(self):
        value = set_value(PROPS, {}, "columns", 2)["columns"]
        assert value == 2 and isinstance(value, int)

    @pytest.mark.parametrize("raw", ["lots", None, True, float("nan")])
    def test_non_numeric_rejected(self, raw):
        with pytest.raises(ValidationRejected) as exc:
            set_value(PROPS, {}, "columns", raw)
        assert exc.value.key == "columns"


class TestChoicesAndFlags:
    def test_select_accepts_option(self):
        assert set_value(PROPS, {}, "height", "50vh")["height"] == "50vh"

    def test_select_rejects_unknown_and_keeps_previous(self):
        config = {"height": "75vh"}
        with pytest.raises(ValidationRejected):
            set_value(PROPS, config, "height", "200vh")
        assert config == {"height": "75vh"}

    @pytest.mark.parametrize("raw, expected", [
        ("true", True), ("on", True), ("1", True), ("yes", True),
        ("false", False), ("off", False), ("0", False), ("", False),
        (1, True), (0, False), (True, True),
    ])
    def test_boolean_coercion(self, raw, expected):
        assert set_value(PROPS, {}, "sticky", raw)["sticky"] is expected

    @pytest.mark.parametrize("raw", ["#fff", "#D6AA52", "#d6aa52cc"])
    def test_color_accepts_hex(self, raw):
        assert set_value(PROPS, {}, "accent", raw)["accent"] == raw

    @pytest.mark.parametrize("raw", ["red", "#12", "D6AA52", 123])
    def test_color_rejects_non_hex(self, raw):
        with pytest.raises(ValidationRejected):
            set_value(PROPS, {}, "accent", raw)


class TestText:
    def test_text_truncated_at_max_length(self):
        assert set_value(PROPS, {}, "note", "abcdefgh")["note"] == "abcde"

    def test_language_write_keeps_other_languages(self):
        config = {"title_override": {"es": "Hola"}}
        updated = set_value(PROPS, config, "title_override", "Hello", language="en")
        assert updated["title_override"] == {"es": "Hola", "en": "Hello"}
        assert config == {"title_override": {"es": "Hola"}}

    def test_language_map_truncated_per_entry(self):
        updated = set_value(PROPS, {}, "title_override", {"en": "A very long title"})
        assert updated["title_override"] == {"en": "A very lon"}

    def test_language_write_replaces_legacy_scalar(self):
        updated = set_value(PROPS, {"title_override": "Old"}, "title_override", "Nuevo", language="es")
        assert updated["title_override"] == {"es": "Nuevo"}

    def test_non_localized_field_rejects_language(self):
        with pytest.raises(ValidationRejected):
            set_value(PROPS, {}, "note", "hi", language="en")


class TestMedia:
    def test_reference_is_stripped(self):
        assert set_value(PROPS, {}, "background", " mediabucket/a.png ")["background"] == "mediabucket/a.png"

    def test_accept_checked_by_extension(self):
        with pytest.raises(ValidationRejected):
            set_value(PROPS, {}, "background", "clip.mp4")

    def test_opaque_key_without_extension_accepted(self):
        assert set_value(PROPS, {}, "background", "asset-123")["background"] == "asset-123"

    def test_non_string_rejected(self):
        with pytest.raises(ValidationRejected):
            set_value(PROPS, {}, "background", {"url": "a.png"})


class TestSetValueContract:
    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationRejected) as exc:
            set_value(PROPS, {}, "nope", 1)
        assert exc.value.key == "nope"

    def test_input_not_mutated(self):
        config = {"columns": 3}
        updated = set_value(PROPS, config, "columns", 4)
        assert config == {"columns": 3}
        assert updated == {"columns": 4}


class TestApplyPatch:
    def test_declared_validated_undeclared_kept(self):
        updated = apply_patch(PROPS, {"columns": 3}, {"logo_size": 0.37, "legacy_flag": "x"})
        assert updated["columns"] == 3
        assert updated["logo_size"] == pytest.approx(0.35)
        assert updated["legacy_flag"] == "x"

    def test_none_clears_declared_value(self):
        assert apply_patch(PROPS, {"columns": 3}, {"columns": None}) == {}

    def test_one_rejection_rejects_the_patch(self):
        config = {"height": "50vh"}
        with pytest.raises(ValidationRejected):
            apply_patch(PROPS, config, {"columns": 2, "height": "huge"})
        assert config == {"height": "50vh"}


class TestForms:
    def test_renderable_fields_use_defaults_and_skip_undeclared(self):
        fields = renderable_fields((HEIGHT, STICKY), {"sticky": False, "extra": 1})
        assert [(p.key, v) for p, v in fields] == [("height", "100vh"), ("sticky", False)]

    def test_defaults_with_overrides(self):
        assert defaults((HEIGHT, STICKY), {"sticky": False, "unknown": 1}) == {"height": "100vh", "sticky": False}

    def test_contract_for_slider(self):
        contract = contract_for(LOGO_SIZE)
        assert contract.widget == "slider"
        assert contract.constraints == {"min": 0.1, "max": 0.5, "step": 0.05}
        assert contract.default == 0.3

    def test_contract_for_localized_text(self):
        contract = contract_for(TITLE)
        assert contract.value_shape == "string_or_language_map"
        assert contract.constraints == {"localized": True, "maxLength": 10}

    def test_form_without_props_is_unavailable(self):
        entry = SectionLibraryEntry(
            section_key="divider",
            name="Divider",
            available_variants=(VariantInfo("standard", "Standard"),),
        )
        form = build_form(entry, {})
        assert form.available is False
        assert form.to_dict()["message"] == NO_CUSTOMIZATION_MESSAGE

    def test_form_uses_variant_defaults(self):
        entry = default_catalog().get("header")
        form = build_form(entry, {}, variant="premium")
        values = {contract.key: value for contract, value in form.fields}
        assert values["style"] == "glass"
        assert values["logo_size"] == 0.3

    def test_form_shows_stored_values(self):
        entry = default_catalog().get("header")
        form = build_form(entry, {"style": "transparent"}, variant="premium").to_dict()
        style = next(f for f in form["fields"] if f["key"] == "style")
        assert style["value"] == "transparent"
        assert style["widget"] == "select"
