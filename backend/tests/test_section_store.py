"""Tests for the SQL-backed section store."""
import pytest

from landing.domain.exceptions import (
    InvalidPermutation,
    NotFound,
    UnregisteredSection,
    ValidationRejected,
)
from landing.domain.invariants.section import assert_unique_order
from landing.models import AuditLog, ConfiguredSection


class TestCreate:
    def test_defaults_from_variant(self, store, tenant, catalog):
        section = store.create(tenant.id, "menu", "premium")

        assert section.config_data == catalog.get("menu").defaults_for("premium")
        assert section.config_data["max_items"] == 6
        assert section.order_index == 1
        assert section.is_active is True

    def test_appends_after_last(self, store, tenant):
        store.create(tenant.id, "hero")
        store.create(tenant.id, "about")
        third = store.create(tenant.id, "menu")
        assert third.order_index == 3

    def test_order_is_per_tenant(self, store, tenant, other_tenant):
        store.create(tenant.id, "hero")
        store.create(tenant.id, "about")
        assert store.create(other_tenant.id, "hero").order_index == 1

    def test_unknown_key_rejected(self, store, tenant):
        with pytest.raises(UnregisteredSection):
            store.create(tenant.id, "newsletter")
        assert store.list(tenant.id) == []

    def test_undeclared_variant_falls_back(self, store, tenant, caplog):
        section = store.create(tenant.id, "hero", "neon")
        assert section.variant == "standard"
        assert "neon" in caplog.text

    def test_missing_variant_uses_first(self, store, tenant):
        assert store.create(tenant.id, "gallery").variant == "standard"

    def test_initial_overrides_validated(self, store, tenant):
        section = store.create(tenant.id, "header", config_data={"logo_size": 0.37})
        assert section.config_data["logo_size"] == pytest.approx(0.35)

        with pytest.raises(ValidationRejected):
            store.create(tenant.id, "header", config_data={"style": "neon"})
        assert len(store.list(tenant.id)) == 1


class TestListAndScope:
    def test_list_ordered(self, store, tenant):
        ids = [store.create(tenant.id, key).id for key in ("hero", "about", "menu")]
        assert [s.id for s in store.list(tenant.id)] == ids

    def test_active_only(self, store, tenant):
        hero = store.create(tenant.id, "hero")
        about = store.create(tenant.id, "about")
        store.toggle(tenant.id, about.id)
        assert [s.id for s in store.list(tenant.id, active_only=True)] == [hero.id]

    def test_foreign_id_is_not_found(self, store, tenant, other_tenant):
        section = store.create(tenant.id, "hero")
        with pytest.raises(NotFound):
            store.update(other_tenant.id, section.id, {"is_active": False})
        with pytest.raises(NotFound):
            store.delete(other_tenant.id, section.id)
        with pytest.raises(NotFound):
            store.toggle(other_tenant.id, section.id)


class TestUpdate:
    def test_config_merged_key_by_key(self, store, tenant):
        section = store.create(tenant.id, "hero", config_data={"height": "75vh"})
        updated = store.update(tenant.id, section.id, {"config_data": {"text_align": "left"}})

        assert updated.config_data["height"] == "75vh"
        assert updated.config_data["text_align"] == "left"

    def test_localized_patch_merges_into_map(self, store, tenant):
        section = store.create(tenant.id, "hero", config_data={"title_override": {"es": "Hola"}})
        updated = store.update(tenant.id, section.id, {"config_data": {"title_override": {"en": "Hello"}}})
        assert updated.config_data["title_override"] == {"es": "Hola", "en": "Hello"}

    def test_rejected_value_keeps_stored(self, store, tenant):
        section = store.create(tenant.id, "hero", config_data={"height": "75vh"})
        with pytest.raises(ValidationRejected):
            store.update(tenant.id, section.id, {"config_data": {"height": "huge", "text_align": "left"}})

        stored = store.list(tenant.id)[0]
        assert stored.config_data["height"] == "75vh"
        assert stored.config_data["text_align"] == "center"

    def test_undeclared_keys_stored(self, store, tenant):
        section = store.create(tenant.id, "hero")
        updated = store.update(tenant.id, section.id, {"config_data": {"slides": [{"url": "a.jpg"}]}})
        assert updated.config_data["slides"] == [{"url": "a.jpg"}]

    def test_variant_replaced_with_fallback(self, store, tenant):
        section = store.create(tenant.id, "hero")
        assert store.update(tenant.id, section.id, {"variant": "premium"}).variant == "premium"
        assert store.update(tenant.id, section.id, {"variant": "neon"}).variant == "standard"

    def test_is_active_replaced(self, store, tenant):
        section = store.create(tenant.id, "hero")
        assert store.update(tenant.id, section.id, {"is_active": False}).is_active is False


class TestDeleteAndToggle:
    def test_delete_keeps_survivor_positions(self, store, tenant):
        first, second, third = (store.create(tenant.id, key) for key in ("hero", "about", "menu"))
        store.delete(tenant.id, second.id)

        assert {s.order_index for s in store.list(tenant.id)} == {1, 3}

    def test_create_after_gap_uses_max(self, store, tenant):
        first, second = (store.create(tenant.id, key) for key in ("hero", "about"))
        store.delete(tenant.id, first.id)
        assert store.create(tenant.id, "menu").order_index == 3

    def test_toggle_flips(self, store, tenant):
        section = store.create(tenant.id, "hero")
        assert store.toggle(tenant.id, section.id).is_active is False
        assert store.toggle(tenant.id, section.id).is_active is True


class TestReorder:
    def test_dense_positions(self, store, tenant):
        a, b, c = (store.create(tenant.id, key) for key in ("hero", "about", "menu"))
        store.reorder(tenant.id, [c.id, a.id, b.id])

        listed = store.list(tenant.id)
        assert [s.id for s in listed] == [c.id, a.id, b.id]
        assert [s.order_index for s in listed] == [1, 2, 3]

    def test_closes_gaps(self, store, tenant):
        a, b, c = (store.create(tenant.id, key) for key in ("hero", "about", "menu"))
        store.delete(tenant.id, b.id)
        store.reorder(tenant.id, [a.id, c.id])
        assert [s.order_index for s in store.list(tenant.id)] == [1, 2]

    def test_idempotent(self, store, tenant):
        ids = [store.create(tenant.id, key).id for key in ("hero", "about", "menu")]
        new_order = [ids[2], ids[0], ids[1]]
        store.reorder(tenant.id, new_order)
        first = store.list(tenant.id)
        store.reorder(tenant.id, new_order)
        assert store.list(tenant.id) == first

    @pytest.mark.parametrize("mutate", [
        lambda ids: ids[:-1],
        lambda ids: ids + ["ghost"],
        lambda ids: ids + [ids[0]],
    ])
    def test_invalid_permutation_applies_nothing(self, store, tenant, mutate):
        ids = [store.create(tenant.id, key).id for key in ("hero", "about", "menu")]
        with pytest.raises(InvalidPermutation):
            store.reorder(tenant.id, mutate(list(reversed(ids))))
        assert [s.id for s in store.list(tenant.id)] == ids

    def test_foreign_ids_rejected(self, store, tenant, other_tenant):
        mine = store.create(tenant.id, "hero")
        theirs = store.create(other_tenant.id, "hero")
        with pytest.raises(InvalidPermutation) as exc:
            store.reorder(tenant.id, [mine.id, theirs.id])
        assert exc.value.unexpected == [theirs.id]

    def test_unique_order_holds(self, store, tenant):
        ids = [store.create(tenant.id, key).id for key in ("hero", "about", "menu", "contact")]
        store.reorder(tenant.id, list(reversed(ids)))
        assert_unique_order(ConfiguredSection.query.filter_by(tenant_id=tenant.id).all())


def test_service_calls_outside_requests_skip_audit(store, tenant):
    store.create(tenant.id, "hero")
    assert AuditLog.query.count() == 0
