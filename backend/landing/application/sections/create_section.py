import logging
from typing import Any, Dict, Optional

from landing.extensions import db
from landing.catalog import Catalog, default_catalog
from landing.domain.exceptions import UnregisteredSection
from landing.domain.invariants.section import recover_variant
from landing.models.configured_section import ConfiguredSection
from landing.schema import apply_patch
from landing.utils.audit import log_action
from landing.utils.transaction import transactional

logger = logging.getLogger(__name__)


def create_section(
    *,
    tenant_id: str,
    section_key: str,
    variant: Optional[str] = None,
    config_data: Optional[Dict[str, Any]] = None,
    catalog: Optional[Catalog] = None,
) -> ConfiguredSection:
    """
    Place a new section at the end of the tenant's page.

    Edge cases handled:
    - Unknown section key (rejected)
    - Undeclared variant (recovered to the entry's first variant)
    - Initial overrides (validated on top of the variant defaults)
    """
    if catalog is None:
        catalog = default_catalog()
    entry = catalog.get(section_key)
    if entry is None:
        raise UnregisteredSection(section_key)

    variant = recover_variant(entry, variant)
    initial = apply_patch(
        entry.customizable_props,
        entry.defaults_for(variant),
        config_data,
    )

    with transactional():
        # Determine the current max order for this tenant
        max_order = db.session.query(db.func.max(ConfiguredSection.order_index))\
            .filter(ConfiguredSection.tenant_id == tenant_id)\
            .scalar() or 0

        section = ConfiguredSection()
        section.tenant_id = tenant_id
        section.section_key = section_key
        section.variant = variant
        section.config_data = initial
        section.order_index = max_order + 1
        section.is_active = True

        db.session.add(section)
        db.session.flush()

        log_action(
            action="section.create",
            entity_type="section",
            entity_id=section.id,
            payload={
                "section_key": section.section_key,
                "variant": section.variant,
                "order_index": section.order_index,
            },
        )

    logger.info(
        "Created section %s (%s/%s) at %s for tenant %s",
        section.id, section_key, variant, section.order_index, tenant_id,
    )
    return section
