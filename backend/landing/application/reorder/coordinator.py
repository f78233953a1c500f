"""
Optimistic reordering.

A reorder is a two-phase commit against the caller's ``SectionView``:

1. ``begin`` validates the permutation and applies it to the view at once.
2. ``PendingReorder.confirm`` persists it through the store. Transport
   failures are retried once (reorder is idempotent). On final failure the
   rollback re-fetches the authoritative order and replaces the view; if the
   refetch fails too, the view falls back to its last authoritative state.
   Either way ``ReorderFailed`` is raised and no merged state survives.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from landing.application.sections.records import SectionRecord
from landing.domain.exceptions import InvalidPermutation, LandingError, ReorderFailed, TransportError
from landing.domain.invariants.order import assert_permutation, dense_positions
from .view import SectionView

logger = logging.getLogger(__name__)

APPLIED = "applied"
CONFIRMED = "confirmed"
ROLLED_BACK = "rolled_back"


class PendingReorder:
    def __init__(
        self,
        coordinator: "ReorderCoordinator",
        view: SectionView,
        ordered_ids: Sequence[str],
        on_rollback: Optional[Callable[[SectionView, Exception], None]] = None,
    ):
        self.coordinator = coordinator
        self.view = view
        self.ordered_ids = list(ordered_ids)
        self.on_rollback = on_rollback
        self.state = APPLIED
        self.refetched = False

    def confirm(self) -> List[SectionRecord]:
        if self.state != APPLIED:
            raise LandingError(f"Reorder already {self.state}")

        try:
            self.coordinator._persist(self.view.tenant_id, self.ordered_ids)
        except Exception as exc:
            self.rollback(exc)
            raise ReorderFailed(exc, refetched=self.refetched) from exc

        self.view.confirm()
        self.state = CONFIRMED
        return self.view.sections

    def rollback(self, cause: Exception) -> None:
        """Discard the optimistic order and resync from the store."""
        self.refetched = False
        try:
            self.view.replace(self.coordinator.store.list(self.view.tenant_id))
            self.refetched = True
        except Exception as exc:
            logger.error(
                "Re-fetch after failed reorder failed for tenant %s: %s",
                self.view.tenant_id, exc,
            )
            self.view.restore()

        self.state = ROLLED_BACK
        logger.warning(
            "Reorder for tenant %s rolled back (refetched=%s): %s",
            self.view.tenant_id, self.refetched, cause,
        )
        if self.on_rollback is not None:
            self.on_rollback(self.view, cause)


class ReorderCoordinator:
    def __init__(self, store, attempts: int = 2):
        self.store = store
        self.attempts = max(1, attempts)

    def begin(
        self,
        view: SectionView,
        ordered_ids: Sequence[str],
        on_rollback: Optional[Callable[[SectionView, Exception], None]] = None,
    ) -> PendingReorder:
        """Phase 1: validate and apply locally. Nothing is applied on error."""
        assert_permutation(ordered_ids, view.ids)
        view.apply_positions(ordered_ids, dense_positions(ordered_ids))
        return PendingReorder(self, view, ordered_ids, on_rollback)

    def reorder(
        self,
        view: SectionView,
        ordered_ids: Sequence[str],
        on_rollback: Optional[Callable[[SectionView, Exception], None]] = None,
    ) -> List[SectionRecord]:
        return self.begin(view, ordered_ids, on_rollback).confirm()

    def move(
        self,
        view: SectionView,
        section_id: str,
        new_position: int,
        on_rollback: Optional[Callable[[SectionView, Exception], None]] = None,
    ) -> List[SectionRecord]:
        """Move one section to ``new_position`` (0-based) and reorder the rest around it."""
        ids = view.ids
        if section_id not in ids:
            raise InvalidPermutation(unexpected=[section_id])
        ids.remove(section_id)
        new_position = min(max(new_position, 0), len(ids))
        ids.insert(new_position, section_id)
        return self.reorder(view, ids, on_rollback)

    def _persist(self, tenant_id: str, ordered_ids: Sequence[str]) -> None:
        for attempt in range(1, self.attempts + 1):
            try:
                self.store.reorder(tenant_id, ordered_ids)
                return
            except TransportError as exc:
                if attempt == self.attempts:
                    raise
                logger.warning(
                    "Reorder attempt %d/%d for tenant %s failed: %s; retrying",
                    attempt, self.attempts, tenant_id, exc,
                )
