"""Tests for permutation checks and the optimistic reorder coordinator."""
import itertools

import pytest

from fakes import FakeSectionStore, record
from landing.application.reorder import ReorderCoordinator, SectionView
from landing.domain.exceptions import InvalidPermutation, ReorderFailed, TransportError
from landing.domain.invariants.order import assert_permutation, dense_positions


def make_store():
    return FakeSectionStore([
        record("a", "hero", 1),
        record("b", "about", 2),
        record("c", "menu", 3),
    ])


def make_view(store):
    return SectionView("t1", store.list("t1"))


class TestPermutation:
    @pytest.mark.parametrize("ordered", list(itertools.permutations(["a", "b", "c"])))
    def test_every_permutation_gets_dense_positions(self, ordered):
        assert_permutation(ordered, ["a", "b", "c"])
        positions = dense_positions(ordered)
        assert [positions[i] for i in ordered] == [1, 2, 3]

    def test_subset_rejected(self):
        with pytest.raises(InvalidPermutation) as exc:
            assert_permutation(["a", "b"], ["a", "b", "c"])
        assert exc.value.missing == ["c"]

    def test_superset_rejected(self):
        with pytest.raises(InvalidPermutation) as exc:
            assert_permutation(["a", "b", "c", "d"], ["a", "b", "c"])
        assert exc.value.unexpected == ["d"]

    def test_duplicate_rejected(self):
        with pytest.raises(InvalidPermutation) as exc:
            assert_permutation(["a", "a", "b", "c"], ["a", "b", "c"])
        assert exc.value.duplicates == ["a"]

    def test_error_payload(self):
        with pytest.raises(InvalidPermutation) as exc:
            assert_permutation(["a"], ["a", "b"])
        assert exc.value.to_dict()["error"] == "InvalidPermutation"
        assert exc.value.to_dict()["missing"] == ["b"]


class TestOptimisticApply:
    def test_view_updated_before_persist(self):
        store = make_store()
        view = make_view(store)
        pending = ReorderCoordinator(store).begin(view, ["c", "a", "b"])

        assert view.ids == ["c", "a", "b"]
        assert [s.order_index for s in view.sections] == [1, 2, 3]
        assert store.reorder_calls == 0
        assert pending.state == "applied"

    def test_confirm_persists_and_marks_authoritative(self):
        store = make_store()
        view = make_view(store)
        sections = ReorderCoordinator(store).reorder(view, ["c", "a", "b"])

        assert [s.id for s in sections] == ["c", "a", "b"]
        assert [s.id for s in view.authoritative] == ["c", "a", "b"]
        assert [s.id for s in store.list("t1")] == ["c", "a", "b"]

    def test_invalid_permutation_leaves_view_alone(self):
        store = make_store()
        view = make_view(store)
        with pytest.raises(InvalidPermutation):
            ReorderCoordinator(store).begin(view, ["c", "a"])
        assert view.ids == ["a", "b", "c"]
        assert store.reorder_calls == 0

    def test_repeat_is_idempotent(self):
        store = make_store()
        view = make_view(store)
        coordinator = ReorderCoordinator(store)
        coordinator.reorder(view, ["b", "c", "a"])
        once = store.list("t1")
        coordinator.reorder(view, ["b", "c", "a"])
        assert store.list("t1") == once

    def test_confirm_twice_rejected(self):
        store = make_store()
        pending = ReorderCoordinator(store).begin(make_view(store), ["b", "a", "c"])
        pending.confirm()
        with pytest.raises(Exception):
            pending.confirm()


class TestRetryAndRollback:
    def test_transport_error_retried_once(self):
        store = make_store()
        store.failures = [TransportError("timeout")]
        view = make_view(store)

        ReorderCoordinator(store).reorder(view, ["c", "b", "a"])

        assert store.reorder_calls == 2
        assert [s.id for s in store.list("t1")] == ["c", "b", "a"]

    def test_rollback_refetches_authoritative_order(self):
        store = make_store()
        store.failures = [TransportError("down"), TransportError("still down")]
        view = make_view(store)
        seen = []

        with pytest.raises(ReorderFailed) as exc:
            ReorderCoordinator(store).reorder(
                view, ["c", "b", "a"], on_rollback=lambda v, cause: seen.append((v.ids, cause))
            )

        assert exc.value.refetched is True
        assert isinstance(exc.value.cause, TransportError)
        assert view.ids == ["a", "b", "c"]
        assert [s.id for s in view.authoritative] == ["a", "b", "c"]
        assert seen and seen[0][0] == ["a", "b", "c"]

    def test_rollback_without_refetch_restores_snapshot(self):
        store = make_store()
        view = make_view(store)
        store.failures = [TransportError("down"), TransportError("down")]
        store.list_failures = [TransportError("list down")]

        with pytest.raises(ReorderFailed) as exc:
            ReorderCoordinator(store).reorder(view, ["b", "a", "c"])

        assert exc.value.refetched is False
        assert view.ids == ["a", "b", "c"]

    def test_non_transport_error_not_retried(self):
        store = make_store()
        store.failures = [InvalidPermutation(missing=["z"])]
        view = make_view(store)

        with pytest.raises(ReorderFailed):
            ReorderCoordinator(store).reorder(view, ["b", "a", "c"])
        assert store.reorder_calls == 1

    def test_rollback_adopts_server_state(self):
        """A section added elsewhere shows up after the refetch."""
        store = make_store()
        view = make_view(store)
        store.records["d"] = record("d", "contact", 4)
        store.failures = [TransportError("down"), TransportError("down")]

        with pytest.raises(ReorderFailed):
            ReorderCoordinator(store).reorder(view, ["c", "b", "a"])
        assert view.ids == ["a", "b", "c", "d"]


class TestMove:
    def test_move_down(self):
        store = make_store()
        view = make_view(store)
        ReorderCoordinator(store).move(view, "a", 2)
        assert [s.id for s in store.list("t1")] == ["b", "c", "a"]

    def test_move_up(self):
        store = make_store()
        view = make_view(store)
        ReorderCoordinator(store).move(view, "c", 0)
        assert view.ids == ["c", "a", "b"]

    def test_position_clamped(self):
        store = make_store()
        view = make_view(store)
        ReorderCoordinator(store).move(view, "a", 99)
        assert view.ids == ["b", "c", "a"]

    def test_unknown_id(self):
        store = make_store()
        with pytest.raises(InvalidPermutation) as exc:
            ReorderCoordinator(store).move(make_view(store), "zzz", 0)
        assert exc.value.unexpected == ["zzz"]
