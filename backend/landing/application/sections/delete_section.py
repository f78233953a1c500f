import logging

from landing.extensions import db
from landing.utils.audit import log_action
from landing.utils.transaction import transactional
from .list_sections import get_section

logger = logging.getLogger(__name__)


def delete_section(*, tenant_id: str, section_id: str) -> None:
    """
    Remove a section. Survivors keep their order_index; gaps persist until
    the next reorder.
    """
    section = get_section(tenant_id=tenant_id, section_id=section_id)

    with transactional():
        log_action(
            action="section.delete",
            entity_type="section",
            entity_id=section.id,
            payload={
                "section_key": section.section_key,
                "order_index": section.order_index,
            },
        )
        db.session.delete(section)

    logger.info("Deleted section %s for tenant %s", section_id, tenant_id)
