from typing import Iterable

from .. import config
from ..data_model import AllocationEntry


def weighted_return(allocations: Iterable[AllocationEntry]) -> float:
    """Blend per-asset returns by their allocation percentages.

    No normalization: a mix that does not add up to 100% still yields a
    number, so check ``is_allocation_valid`` before trusting it.
    """
    return sum(entry.weight() * entry.return_rate for entry in allocations)


def allocation_total(allocations: Iterable[AllocationEntry]) -> float:
    return sum(entry.allocation_percentage for entry in allocations)


def is_allocation_valid(
    allocations: Iterable[AllocationEntry],
    tolerance: float = config.ALLOCATION_TOLERANCE,
) -> bool:
    return abs(allocation_total(allocations) - 100.0) < tolerance
