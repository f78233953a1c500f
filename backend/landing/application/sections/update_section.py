import logging
from typing import Any, Dict, Optional

from landing.catalog import Catalog, default_catalog
from landing.domain.exceptions import UnregisteredSection
from landing.domain.invariants.section import recover_variant
from landing.models.configured_section import ConfiguredSection
from landing.schema import apply_patch
from landing.utils.audit import log_action
from landing.utils.transaction import transactional
from .list_sections import get_section

logger = logging.getLogger(__name__)


ALLOWED_UPDATE_FIELDS = {"variant", "config_data", "is_active"}


def update_section(
    *,
    tenant_id: str,
    section_id: str,
    data: Dict[str, Any],
    catalog: Optional[Catalog] = None,
    section: Optional[ConfiguredSection] = None,
) -> ConfiguredSection:
    """
    Update mutable fields on a configured section.

    Design rules:
    - config_data is merged key by key, never replaced wholesale
    - declared props are validated; one rejected value rejects the update
    - variant falls back to the first declared one when undeclared
    """
    if catalog is None:
        catalog = default_catalog()
    if section is None:
        section = get_section(tenant_id=tenant_id, section_id=section_id)

    entry = catalog.get(section.section_key)
    if entry is None:
        raise UnregisteredSection(section.section_key)

    changed_fields: list[str] = []

    # Validate before touching the row so a rejection keeps stored values.
    new_config = None
    if data.get("config_data") is not None:
        new_config = apply_patch(
            entry.customizable_props,
            section.config_data,
            data["config_data"],
        )

    with transactional():
        if "variant" in data and data["variant"] is not None:
            variant = recover_variant(entry, data["variant"])
            if variant != section.variant:
                section.variant = variant
                changed_fields.append("variant")

        if new_config is not None and new_config != (section.config_data or {}):
            section.config_data = new_config
            changed_fields.append("config_data")

        if "is_active" in data and bool(data["is_active"]) != section.is_active:
            section.is_active = bool(data["is_active"])
            changed_fields.append("is_active")

        if changed_fields:
            log_action(
                action="section.update",
                entity_type="section",
                entity_id=section.id,
                payload={"fields": changed_fields},
            )

    logger.info("Updated section %s fields=%s", section.id, changed_fields)
    return section
