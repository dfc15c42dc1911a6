"""
RacingWeb - Heat scheduling and scoring for lane-based races.

This package provides:
- Roster building for a field of cars
- Heat schedules by round-robin rotation or a pre-generated 4-lane pattern
- Reordering of heats so cars rarely race back to back
- Finish line result tracking per heat and lane
- Standings by lowest total finishing place
"""

__version__ = "0.1.0"

from racingweb.roster.car import Car
from racingweb.roster.roster import Roster, build_roster
from racingweb.schedule.generator import generate_schedule
from racingweb.scoring.results import ResultsTracker
from racingweb.scoring.standings import calculate_standings
from racingweb.session.session import RaceSession

__all__ = [
    "Car",
    "Roster",
    "build_roster",
    "generate_schedule",
    "ResultsTracker",
    "calculate_standings",
    "RaceSession",
    "__version__",
]
