from landing.extensions import db
from .base import BaseModel

class Tenant(BaseModel):
    """A restaurant: the isolation scope for landing configuration."""
    __tablename__ = "tenants"

    # Basic info
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True)

    default_language = db.Column(db.String(8), nullable=False, default="es")
    logo_url = db.Column(db.String(512), nullable=True)
    cover_image_url = db.Column(db.String(512), nullable=True)

    # Contact and location
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(64), nullable=True)
    address = db.Column(db.String(512), nullable=True)
    city = db.Column(db.String(128), nullable=True)
    country = db.Column(db.String(128), nullable=True)

    # Theme tokens handed to renderers untouched
    theme = db.Column(db.JSON, default=dict)

    # Feature toggles
    enable_landing = db.Column(db.Boolean, default=True)
    enable_multilingual = db.Column(db.Boolean, default=True)

    # JSON field for future toggles (flexible)
    features = db.Column(db.JSON, default=dict)

    def has_feature(self, feature_name: str) -> bool:
        """
        Check if a feature is enabled for this tenant.
        """
        # Check JSON overrides first
        overrides = self.features or {}
        if overrides.get(feature_name) is not None:
            return bool(overrides.get(feature_name))

        # Fallback to attribute toggles
        attr_name = f"enable_{feature_name}"
        return bool(getattr(self, attr_name, False))
