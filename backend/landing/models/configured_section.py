from landing.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin

class ConfiguredSection(BaseModel, TenantMixin):
    """A tenant's placed instance of one catalog section + variant."""
    __tablename__ = "configured_sections"

    section_key = db.Column(db.String(100), nullable=False, index=True)  # hero, menu, gallery
    variant = db.Column(db.String(100), nullable=False, default="standard")
    config_data = db.Column(db.JSON, nullable=False, default=dict)
    order_index = db.Column(db.Integer, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    __table_args__ = (
        db.UniqueConstraint("tenant_id", "order_index", name="uq_section_order_per_tenant"),
        db.Index("idx_section_tenant_order", "tenant_id", "order_index"),
    )
