"""
Schedule generator - Heat-by-heat lane assignments for a roster.

Generates:
- Round-robin schedules with triangular lane offsets
- Pre-generated 4-lane schedules for small fields
- Adjacency-optimized running order
"""

from dataclasses import dataclass
from typing import List
import logging
import numpy as np

from racingweb.roster.roster import Roster
from racingweb.schedule.heat import Heat, Schedule
from racingweb.schedule.optimizer import count_adjacent_repeats, optimize_adjacency
from racingweb.schedule.pregen import is_pregenerated_applicable, load_pregenerated_schedule

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for schedule generation."""
    use_pregenerated_table: bool = True   # 4-lane table for 4..13 cars
    optimize_adjacency: bool = True       # Reorder to avoid back-to-back cars


def lane_offsets(lane_count: int) -> List[int]:
    """Triangular roster offsets per lane: 0, 1, 3, 6, 10, ...

    Staggering the offsets changes which cars meet from heat to heat
    more than a constant shift would.

    Args:
        lane_count: Number of lanes

    Returns:
        Offset for each lane
    """
    return np.cumsum(np.arange(lane_count)).tolist()


def generate_round_robin(roster: Roster, lane_count: int) -> List[Heat]:
    """Rotate the roster through the lanes.

    Lane ``lane`` of heat ``i`` gets roster index
    ``(i + offset[lane]) % car_count``.

    Args:
        roster: Cars in the race
        lane_count: Lanes per heat

    Returns:
        One heat per car, in generated order
    """
    car_count = len(roster)
    offsets = np.array(lane_offsets(lane_count), dtype=int)
    positions = (np.arange(car_count)[:, np.newaxis] + offsets[np.newaxis, :]) % car_count

    return [
        Heat(cars=tuple(roster[int(pos)] for pos in row))
        for row in positions
    ]


def generate_heats(
    roster: Roster,
    lane_count: int,
    use_pregenerated_table: bool = True,
) -> List[Heat]:
    """Generate heats in their unoptimized order.

    Args:
        roster: Cars in the race
        lane_count: Lanes per heat (1 <= lane_count <= len(roster))
        use_pregenerated_table: Allow the 4-lane table

    Returns:
        Unoptimized heats

    Raises:
        ValueError: If lane_count is out of range
    """
    car_count = len(roster)
    if not 1 <= lane_count <= car_count:
        raise ValueError(
            f"Lane count must be between 1 and {car_count}, got {lane_count}"
        )

    if use_pregenerated_table and is_pregenerated_applicable(car_count, lane_count):
        heats = load_pregenerated_schedule(roster)
        if heats:
            logger.debug("Using pre-generated 4-lane pattern for %d cars", car_count)
            return heats

    return generate_round_robin(roster, lane_count)


class ScheduleGenerator:
    """Race schedule generator.

    Clamps the lane count to the roster size, picks round-robin or
    table generation, then optimizes the running order.

    Usage:
        generator = ScheduleGenerator()
        schedule = generator.generate(build_roster(12), 4)
    """

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize generator.

        Args:
            config: Generator configuration. Uses defaults if None.
        """
        self.config = config or GeneratorConfig()

    def generate(self, roster: Roster, lane_count: int) -> Schedule:
        """Generate a schedule.

        Args:
            roster: Cars in the race
            lane_count: Requested lanes; capped at the number of cars

        Returns:
            Complete schedule

        Raises:
            ValueError: If lane_count < 1
        """
        if lane_count < 1:
            raise ValueError(f"Lane count must be at least 1, got {lane_count}")

        car_count = len(roster)
        if lane_count > car_count:
            logger.info("Capping %d lanes to %d cars", lane_count, car_count)
            lane_count = car_count

        heats = generate_heats(roster, lane_count, self.config.use_pregenerated_table)
        if self.config.optimize_adjacency:
            before = count_adjacent_repeats(heats)
            heats = optimize_adjacency(heats)
            after = count_adjacent_repeats(heats)
            if after:
                logger.info(
                    "%d of %d heat transitions still repeat a car", after, len(heats) - 1
                )
            logger.debug("Adjacent repeats reduced from %d to %d", before, after)

        logger.info(
            "Generated %d heats for %d cars on %d lanes", len(heats), car_count, lane_count
        )
        return Schedule(roster=roster, heats=tuple(heats), lane_count=lane_count)


def generate_schedule(
    roster: Roster,
    lane_count: int,
    config: GeneratorConfig | None = None,
) -> Schedule:
    """Generate an optimized schedule for a roster.

    Args:
        roster: Cars in the race
        lane_count: Requested lanes; capped at the number of cars
        config: Generator configuration

    Returns:
        Complete schedule
    """
    return ScheduleGenerator(config).generate(roster, lane_count)
