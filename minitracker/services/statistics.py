"""
List statistics - roll a list's items up into totals and progress histograms.
"""

from collections.abc import Iterable

from minitracker.core.statuses import AssemblyStatus, PaintingStatus
from minitracker.schemas.list import ListItemDetail, ListStatistics


def empty_histogram(enum_cls) -> dict[str, int]:
    """Every status key present, all zero."""
    return {status.value: 0 for status in enum_cls}


def compute_statistics(items: Iterable[ListItemDetail]) -> ListStatistics:
    """
    Single pass over a list's items.

    totalItems counts rows; totalPoints and both histograms are weighted by
    quantity. A missing points value counts as 0.
    """
    assembly = empty_histogram(AssemblyStatus)
    painting = empty_histogram(PaintingStatus)
    total_items = 0
    total_points = 0

    for item in items:
        total_items += 1
        total_points += (item.points_value or 0) * item.quantity
        assembly[AssemblyStatus(item.assembly_status).value] += item.quantity
        painting[PaintingStatus(item.painting_status).value] += item.quantity

    return ListStatistics(
        total_items=total_items,
        total_points=total_points,
        assembly_progress=assembly,
        painting_progress=painting,
    )
