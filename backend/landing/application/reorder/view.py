from typing import Dict, Iterable, List, Sequence, Tuple

from landing.application.sections.records import SectionRecord


class SectionView:
    """
    The caller's in-memory, ordered view of one tenant's sections.

    ``authoritative`` is the last order confirmed by the store; the live
    ``sections`` may run ahead of it while a reorder is pending.
    """

    def __init__(self, tenant_id: str, sections: Iterable[SectionRecord] = ()):
        self.tenant_id = tenant_id
        self._sections: Tuple[SectionRecord, ...] = tuple(sections)
        self._authoritative: Tuple[SectionRecord, ...] = self._sections

    @property
    def sections(self) -> List[SectionRecord]:
        return list(self._sections)

    @property
    def authoritative(self) -> List[SectionRecord]:
        return list(self._authoritative)

    @property
    def ids(self) -> List[str]:
        return [s.id for s in self._sections]

    def apply_positions(self, ordered_ids: Sequence[str], positions: Dict[str, int]) -> None:
        by_id = {s.id: s for s in self._sections}
        self._sections = tuple(
            by_id[section_id].with_order(positions[section_id]) for section_id in ordered_ids
        )

    def confirm(self) -> None:
        self._authoritative = self._sections

    def replace(self, sections: Iterable[SectionRecord]) -> None:
        """Adopt a fresh authoritative listing wholesale."""
        self._sections = tuple(sections)
        self._authoritative = self._sections

    def restore(self) -> None:
        self._sections = self._authoritative
