"""
The section store contract and its SQLAlchemy implementation.

``SectionStore`` is what the reorder coordinator and the page composer need
from persistence. ``SqlSectionStore`` runs in-process against the database;
``landing.client.LandingAdminClient`` satisfies the same contract over HTTP.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence

from landing.catalog import Catalog, default_catalog
from landing.extensions import db
from .create_section import create_section
from .delete_section import delete_section
from .list_sections import list_sections
from .records import SectionRecord
from .reorder_sections import reorder_sections
from .toggle_section import toggle_section
from .update_section import update_section


class SectionStore(Protocol):
    def fetch_catalog(self) -> Catalog: ...

    def list(self, tenant_id: str) -> List[SectionRecord]: ...

    def create(
        self,
        tenant_id: str,
        section_key: str,
        variant: Optional[str] = None,
        config_data: Optional[Dict[str, Any]] = None,
    ) -> SectionRecord: ...

    def update(self, tenant_id: str, section_id: str, patch: Dict[str, Any]) -> SectionRecord: ...

    def delete(self, tenant_id: str, section_id: str) -> None: ...

    def toggle(self, tenant_id: str, section_id: str) -> SectionRecord: ...

    def reorder(self, tenant_id: str, ordered_ids: Sequence[str]) -> None: ...


class SqlSectionStore:
    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def fetch_catalog(self) -> Catalog:
        return self.catalog

    def list(self, tenant_id: str, active_only: bool = False) -> List[SectionRecord]:
        return [
            SectionRecord.from_model(s)
            for s in list_sections(tenant_id=tenant_id, active_only=active_only)
        ]

    def create(self, tenant_id, section_key, variant=None, config_data=None) -> SectionRecord:
        section = create_section(
            tenant_id=tenant_id,
            section_key=section_key,
            variant=variant,
            config_data=config_data,
            catalog=self.catalog,
        )
        return SectionRecord.from_model(section)

    def update(self, tenant_id, section_id, patch) -> SectionRecord:
        section = update_section(
            tenant_id=tenant_id,
            section_id=section_id,
            data=patch,
            catalog=self.catalog,
        )
        return SectionRecord.from_model(section)

    def delete(self, tenant_id, section_id) -> None:
        delete_section(tenant_id=tenant_id, section_id=section_id)

    def toggle(self, tenant_id, section_id) -> SectionRecord:
        return SectionRecord.from_model(
            toggle_section(tenant_id=tenant_id, section_id=section_id)
        )

    def reorder(self, tenant_id, ordered_ids) -> None:
        reorder_sections(tenant_id=tenant_id, ordered_ids=ordered_ids)
        # Drop identity-map state so the next list() reads committed rows.
        db.session.expire_all()
