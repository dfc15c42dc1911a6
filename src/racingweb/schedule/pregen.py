"""
Pre-generated 4-lane schedules.

Round-robin offsets mix small fields poorly, so 4-lane races with up to
13 cars start from a hand-tuned first heat instead (the balanced
"Perfect-N" style patterns published for pinewood derby tracks).
Every later heat advances each lane of the first heat by one roster
position.
"""

from typing import Dict, List, Optional, Tuple
import numpy as np

from racingweb.roster.roster import Roster
from racingweb.schedule.heat import Heat

PREGEN_LANE_COUNT = 4
MIN_PREGEN_CARS = 4
MAX_PREGEN_CARS = 13

# car count -> 1-based roster positions for lanes 1-4 of the first heat
PREGENERATED_FIRST_HEATS: Dict[int, Tuple[int, int, int, int]] = {
    4: (1, 4, 3, 2),
    5: (1, 3, 5, 2),
    6: (1, 3, 5, 2),
    7: (1, 3, 5, 2),
    8: (1, 3, 5, 8),
    9: (1, 3, 5, 9),
    10: (1, 3, 5, 10),
    11: (1, 3, 5, 11),
    12: (1, 3, 7, 12),
    13: (1, 3, 7, 6),
}

# Used for every field larger than the table
DEFAULT_FIRST_HEAT: Tuple[int, int, int, int] = (1, 3, 7, 6)


def pregenerated_first_heat(car_count: int) -> Optional[Tuple[int, int, int, int]]:
    """Look up the first-heat pattern for a field size.

    Args:
        car_count: Number of cars

    Returns:
        Four 1-based roster positions, or None for fewer than 4 cars
    """
    if car_count < MIN_PREGEN_CARS:
        return None
    return PREGENERATED_FIRST_HEATS.get(car_count, DEFAULT_FIRST_HEAT)


def is_pregenerated_applicable(car_count: int, lane_count: int) -> bool:
    """Check whether the 4-lane table should be used."""
    return (
        lane_count == PREGEN_LANE_COUNT
        and MIN_PREGEN_CARS <= car_count <= MAX_PREGEN_CARS
    )


def load_pregenerated_schedule(roster: Roster) -> List[Heat]:
    """Build a 4-lane schedule from the pattern table.

    Args:
        roster: Cars in the race

    Returns:
        One heat per car, or an empty list when the roster has fewer
        than 4 cars (the caller must fall back to round-robin)
    """
    car_count = len(roster)
    first_heat = pregenerated_first_heat(car_count)
    if first_heat is None:
        return []

    start = np.array(first_heat) - 1
    positions = (start[np.newaxis, :] + np.arange(car_count)[:, np.newaxis]) % car_count

    return [
        Heat(cars=tuple(roster[int(pos)] for pos in row))
        for row in positions
    ]
