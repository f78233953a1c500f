"""Plain snapshots of configured sections, detached from the ORM session."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class SectionRecord:
    id: str
    tenant_id: str
    section_key: str
    variant: str
    order_index: int
    is_active: bool = True
    config_data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_model(cls, section) -> "SectionRecord":
        return cls(
            id=section.id,
            tenant_id=section.tenant_id,
            section_key=section.section_key,
            variant=section.variant,
            order_index=section.order_index,
            is_active=bool(section.is_active),
            config_data=copy.deepcopy(section.config_data or {}),
        )

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SectionRecord":
        return cls(
            id=raw["id"],
            tenant_id=raw.get("tenant_id", ""),
            section_key=raw["section_key"],
            variant=raw.get("variant") or "standard",
            order_index=int(raw["order_index"]),
            is_active=bool(raw.get("is_active", True)),
            config_data=dict(raw.get("config_data") or {}),
        )

    def with_order(self, order_index: int) -> "SectionRecord":
        return replace(self, order_index=order_index)
