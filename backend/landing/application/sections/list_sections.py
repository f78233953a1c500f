from typing import List

from landing.models.configured_section import ConfiguredSection
from landing.domain.exceptions import NotFound


def list_sections(*, tenant_id: str, active_only: bool = False) -> List[ConfiguredSection]:
    """
    A tenant's sections in render order.

    Ties on order_index cannot occur in storage (unique per tenant); the
    created_at key keeps the ordering total anyway.
    """
    query = ConfiguredSection.query.filter_by(tenant_id=tenant_id)
    if active_only:
        query = query.filter_by(is_active=True)

    return query.order_by(
        ConfiguredSection.order_index.asc(),
        ConfiguredSection.created_at.asc(),
    ).all()


def get_section(*, tenant_id: str, section_id: str) -> ConfiguredSection:
    section = ConfiguredSection.query.filter_by(
        id=section_id,
        tenant_id=tenant_id,
    ).first()

    if not section:
        raise NotFound(f"Section {section_id} not found")

    return section
