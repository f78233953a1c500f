from landing.extensions import db
from .base import BaseModel


class Translation(BaseModel):
    """One translated field of a tenant-owned entity (restaurant, dish...)."""
    __tablename__ = "translations"

    entity_type = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.String(36), nullable=False, index=True)
    field = db.Column(db.String(100), nullable=False)
    language_code = db.Column(db.String(8), nullable=False)
    value = db.Column(db.Text, nullable=False, default="")

    __table_args__ = (
        db.UniqueConstraint(
            "entity_type", "entity_id", "field", "language_code",
            name="uq_translation_field_language",
        ),
    )


class LocalizationString(BaseModel):
    """Global UI string, keyed per context and language."""
    __tablename__ = "localization_strings"

    context = db.Column(db.String(50), nullable=False, default="landing", index=True)
    key_name = db.Column(db.String(150), nullable=False)
    language_code = db.Column(db.String(8), nullable=False)
    label = db.Column(db.Text, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("context", "key_name", "language_code", name="uq_ui_string"),
    )
