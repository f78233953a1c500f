"""
Domain errors for landing composition.

Each error carries a stable ``kind`` used as the ``error`` field of API
responses and an HTTP status used by ``register_error_handlers``.
"""
from typing import Iterable, Optional


class LandingError(Exception):
    kind = "LandingError"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind

    def to_dict(self):
        return {"error": self.kind, "message": self.message}


class InvariantViolation(LandingError):
    kind = "InvariantViolation"


class NotFound(LandingError):
    kind = "NotFound"
    status_code = 404


class InvalidVariant(LandingError):
    kind = "InvalidVariant"

    def __init__(self, section_key: str, variant: Optional[str], fallback: Optional[str] = None):
        self.section_key = section_key
        self.variant = variant
        self.fallback = fallback
        super().__init__(f"Variant '{variant}' is not declared by section '{section_key}'")


class InvalidPermutation(LandingError):
    kind = "InvalidPermutation"

    def __init__(self, missing: Iterable[str] = (), unexpected: Iterable[str] = (), duplicates: Iterable[str] = ()):
        self.missing = sorted(missing)
        self.unexpected = sorted(unexpected)
        self.duplicates = sorted(duplicates)
        parts = []
        if self.missing:
            parts.append(f"missing={self.missing}")
        if self.unexpected:
            parts.append(f"unexpected={self.unexpected}")
        if self.duplicates:
            parts.append(f"duplicates={self.duplicates}")
        super().__init__("Reorder ids must be a permutation of the tenant's sections: " + ", ".join(parts))

    def to_dict(self):
        data = super().to_dict()
        data.update(missing=self.missing, unexpected=self.unexpected, duplicates=self.duplicates)
        return data


class ValidationRejected(LandingError):
    kind = "ValidationRejected"
    status_code = 422

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"{key}: {reason}")

    def to_dict(self):
        data = super().to_dict()
        data.update(key=self.key, reason=self.reason)
        return data


class UnregisteredSection(LandingError):
    kind = "UnregisteredSection"

    def __init__(self, section_key: str):
        self.section_key = section_key
        super().__init__(f"Section '{section_key}' is not in the library")


class TransportError(LandingError):
    """Network, timeout or server-side failure talking to the section store."""
    kind = "TransportError"
    status_code = 502

    def __init__(self, message: str, status_code: Optional[int] = None, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.remote_status = status_code
        self.original_error = original_error


class ReorderFailed(LandingError):
    """The durable reorder failed; the caller's view was restored."""
    kind = "ReorderFailed"
    status_code = 502

    def __init__(self, cause: Exception, refetched: bool):
        self.cause = cause
        self.refetched = refetched
        state = "re-fetched authoritative order" if refetched else "kept last authoritative order"
        super().__init__(f"Reorder was not persisted ({cause}); {state}")
