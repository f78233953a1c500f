from landing.models.configured_section import ConfiguredSection
from landing.utils.audit import log_action
from landing.utils.transaction import transactional
from .list_sections import get_section


def toggle_section(*, tenant_id: str, section_id: str) -> ConfiguredSection:
    section = get_section(tenant_id=tenant_id, section_id=section_id)

    with transactional():
        section.is_active = not section.is_active

        log_action(
            action="section.toggle",
            entity_type="section",
            entity_id=section.id,
            payload={"is_active": section.is_active},
        )

    return section
