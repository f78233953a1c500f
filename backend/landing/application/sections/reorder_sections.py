import logging
from typing import List, Sequence

from landing.extensions import db
from landing.domain.invariants.order import assert_permutation, dense_positions
from landing.domain.invariants.section import assert_unique_order
from landing.models.configured_section import ConfiguredSection
from landing.utils.audit import log_action
from landing.utils.transaction import transactional
from .list_sections import list_sections

logger = logging.getLogger(__name__)


def reorder_sections(*, tenant_id: str, ordered_ids: Sequence[str]) -> List[ConfiguredSection]:
    """
    Persist a full permutation of the tenant's sections as order_index 1..N.

    The (tenant_id, order_index) unique constraint would trip on intermediate
    states, so rows are first parked on negative indexes and then written
    with their final values, all inside one transaction.
    """
    sections = list_sections(tenant_id=tenant_id)
    assert_permutation(ordered_ids, [s.id for s in sections])

    positions = dense_positions(ordered_ids)
    by_id = {s.id: s for s in sections}

    with transactional():
        for index, section_id in enumerate(ordered_ids, start=1):
            by_id[section_id].order_index = -index
        db.session.flush()

        for section_id, order_index in positions.items():
            by_id[section_id].order_index = order_index
        assert_unique_order(sections)
        db.session.flush()

        log_action(
            action="section.reorder",
            entity_type="tenant",
            entity_id=tenant_id,
            payload={"ids": list(ordered_ids)},
        )

    logger.info("Reordered %d sections for tenant %s", len(ordered_ids), tenant_id)
    return [by_id[section_id] for section_id in ordered_ids]
