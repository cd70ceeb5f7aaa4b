"""
Ordering of walk records by distance from home.
"""

from operator import attrgetter
from typing import Iterable, List

from fancywalks.models.walk import WalkRecord

by_distance = attrgetter("distance")


def rank_walks(walks: Iterable[WalkRecord]) -> List[WalkRecord]:
    """
    Return walks nearest first.

    The sort is stable: walks at equal distance keep their input order.
    """
    return sorted(walks, key=by_distance)


def sort_walks(walks: List[WalkRecord]) -> None:
    """Sort walks nearest first, in place and stable."""
    walks.sort(key=by_distance)
