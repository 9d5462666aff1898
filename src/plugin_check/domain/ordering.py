"""Deterministic ordering of annotations.

Rules may run concurrently and finish in any order, so every batch is sorted
before it is encoded. The order is: file location, then rule id, then message.
The against location is not a key: breaking change failures are listed where
they are observed.
"""

from functools import cmp_to_key
from typing import Iterable, Optional

from plugin_check.domain.entities import Annotation
from plugin_check.domain.locations import compare_file_locations


def _compare_str(one: str, two: str) -> int:
    return (one > two) - (one < two)


def compare_annotations(one: Optional[Annotation], two: Optional[Annotation]) -> int:
    """Three-way compare. Returns -1, 0 or 1; None sorts before any annotation."""
    if one is None and two is None:
        return 0
    if one is None:
        return -1
    if two is None:
        return 1
    compare = compare_file_locations(one.file_location, two.file_location)
    if compare != 0:
        return compare
    compare = _compare_str(one.rule_id, two.rule_id)
    if compare != 0:
        return compare
    return _compare_str(one.message, two.message)


def sort_annotations(annotations: Iterable[Annotation]) -> list[Annotation]:
    """Return a new list of the annotations in compare_annotations order."""
    return sorted(annotations, key=cmp_to_key(compare_annotations))
