import logging
from typing import Iterable, Optional

from landing.catalog.entries import SectionLibraryEntry
from landing.domain.exceptions import InvalidVariant, InvariantViolation

logger = logging.getLogger(__name__)


def recover_variant(entry: SectionLibraryEntry, variant: Optional[str]) -> str:
    """
    Return ``variant`` if the entry declares it, else the first declared one.

    The ``InvalidVariant`` is logged and recovered, never raised.
    """
    if entry.has_variant(variant):
        return variant  # type: ignore[return-value]

    error = InvalidVariant(entry.section_key, variant, fallback=entry.first_variant)
    logger.warning("%s; using '%s'", error.message, entry.first_variant)
    return entry.first_variant


def assert_unique_order(sections: Iterable) -> None:
    orders = [section.order_index for section in sections]
    duplicates = sorted({o for o in orders if orders.count(o) > 1})

    if duplicates:
        raise InvariantViolation(
            f"Section order_index values must be unique per tenant: {duplicates}"
        )
