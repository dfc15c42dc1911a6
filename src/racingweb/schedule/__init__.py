"""
Schedule module - Heat generation and running order.

This module contains:
- Heat, Schedule: Lane assignments for a roster
- ScheduleGenerator: Round-robin and pre-generated 4-lane schedules
- optimize_adjacency: Greedy reordering to avoid back-to-back cars
"""

from racingweb.schedule.heat import Heat, Schedule
from racingweb.schedule.generator import (
    GeneratorConfig,
    ScheduleGenerator,
    generate_heats,
    generate_round_robin,
    generate_schedule,
    lane_offsets,
)
from racingweb.schedule.optimizer import count_adjacent_repeats, optimize_adjacency
from racingweb.schedule.pregen import (
    PREGENERATED_FIRST_HEATS,
    load_pregenerated_schedule,
    pregenerated_first_heat,
)

__all__ = [
    "Heat",
    "Schedule",
    "GeneratorConfig",
    "ScheduleGenerator",
    "generate_heats",
    "generate_round_robin",
    "generate_schedule",
    "lane_offsets",
    "optimize_adjacency",
    "count_adjacent_repeats",
    "PREGENERATED_FIRST_HEATS",
    "load_pregenerated_schedule",
    "pregenerated_first_heat",
]
