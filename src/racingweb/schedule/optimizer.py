"""
Adjacency optimizer - Reorder heats so cars rarely race back to back.

Single greedy pass with one heat of lookahead. The result is not a
global optimum, and is kept that way so generated schedules stay
stable for a given car/lane count.
"""

import logging
from typing import List, Sequence

from racingweb.schedule.heat import Heat

logger = logging.getLogger(__name__)


def optimize_adjacency(heats: Sequence[Heat]) -> List[Heat]:
    """Reorder heats to avoid shared cars in consecutive heats.

    The first heat always stays first. Each following slot takes the
    first remaining heat (in input order) that shares no car with the
    heat placed before it, or the first remaining heat if every
    candidate shares one.

    Args:
        heats: Heats in generated order (not modified)

    Returns:
        New list with the same heats in optimized order
    """
    if not heats:
        return []

    remaining = list(range(1, len(heats)))
    ordered = [heats[0]]

    while remaining:
        previous = ordered[-1]
        pick = 0
        for candidate, heat_index in enumerate(remaining):
            if not previous.shares_car_with(heats[heat_index]):
                pick = candidate
                break
        else:
            logger.debug(
                "No disjoint heat after position %d, forced repeat", len(ordered) - 1
            )

        ordered.append(heats[remaining.pop(pick)])

    return ordered


def count_adjacent_repeats(heats: Sequence[Heat]) -> int:
    """Count consecutive heat pairs that share at least one car.

    Args:
        heats: Heats in running order

    Returns:
        Number of back-to-back pairs with a common car
    """
    return sum(
        1 for first, second in zip(heats, heats[1:])
        if first.shares_car_with(second)
    )
