from .tenant import Tenant
from .configured_section import ConfiguredSection
from .translation import Translation, LocalizationString
from .audit_log import AuditLog

__all__ = [
    "Tenant",
    "ConfiguredSection",
    "Translation",
    "LocalizationString",
    "AuditLog",
]
