from typing import Dict, Iterable, Sequence

from landing.domain.exceptions import InvalidPermutation


def assert_permutation(ordered_ids: Sequence[str], current_ids: Iterable[str]) -> None:
    """``ordered_ids`` must name every current id exactly once."""
    current = set(current_ids)
    seen = set()
    duplicates = set()
    for section_id in ordered_ids:
        if section_id in seen:
            duplicates.add(section_id)
        seen.add(section_id)

    missing = current - seen
    unexpected = seen - current

    if missing or unexpected or duplicates:
        raise InvalidPermutation(missing=missing, unexpected=unexpected, duplicates=duplicates)


def dense_positions(ordered_ids: Sequence[str]) -> Dict[str, int]:
    """Assign order_index 1..N in sequence order."""
    return {section_id: index for index, section_id in enumerate(ordered_ids, start=1)}
