"""
Race session - Owns the state of one race from setup to standings.

Manages:
- Roster, schedule and results (replaced together on regeneration)
- The current heat pointer
- Display text for a host application
"""

from typing import List, Optional
import logging

from racingweb.config import RaceConfig
from racingweb.roster.car import Car
from racingweb.roster.roster import Roster
from racingweb.schedule.generator import ScheduleGenerator
from racingweb.schedule.heat import Heat, Schedule
from racingweb.scoring.results import Result, ResultsTracker
from racingweb.scoring.standings import Standing, calculate_standings, standings_table

logger = logging.getLogger(__name__)


class RaceSession:
    """State container for one race.

    A session is single-threaded; serve concurrent users with one
    session each. Generating a schedule replaces the roster, schedule,
    results and current heat in one step.

    Usage:
        session = RaceSession()
        session.generate_schedule(12, 4)

        while not session.is_finished:
            for lane, place in enumerate(places):
                session.mark_place(lane, place)
            session.advance()

        session.standings()
    """

    def __init__(self, config: RaceConfig | None = None):
        """Initialize session.

        Args:
            config: Race configuration. Uses defaults if None.
        """
        self.config = config or RaceConfig()
        self.generator = ScheduleGenerator(self.config.generator_config)

        self._roster: Optional[Roster] = None
        self._schedule: Optional[Schedule] = None
        self._tracker: Optional[ResultsTracker] = None
        self._current_heat: int = 0

    @property
    def has_schedule(self) -> bool:
        return self._schedule is not None

    @property
    def roster(self) -> Roster:
        """Cars in the race."""
        self._require_schedule()
        return self._roster

    @property
    def schedule(self) -> Schedule:
        """Current schedule."""
        self._require_schedule()
        return self._schedule

    @property
    def tracker(self) -> ResultsTracker:
        """Results for the current schedule."""
        self._require_schedule()
        return self._tracker

    @property
    def current_heat(self) -> int:
        """Index of the heat being run (== heat count when finished)."""
        return self._current_heat

    @property
    def is_finished(self) -> bool:
        """Check if every heat has been run."""
        self._require_schedule()
        return self._current_heat >= len(self._schedule)

    @property
    def current_lineup(self) -> Optional[Heat]:
        """Heat being run, or None once racing is finished."""
        if self.is_finished:
            return None
        return self._schedule[self._current_heat]

    def _require_schedule(self) -> None:
        if self._schedule is None:
            raise RuntimeError("No schedule generated")

    def generate_schedule(
        self,
        car_count: int | None = None,
        lane_count: int | None = None,
    ) -> Schedule:
        """Build a roster and schedule, discarding any previous race.

        Args:
            car_count: Number of cars (config default if None)
            lane_count: Number of lanes, capped at car_count
                (config default if None)

        Returns:
            New schedule

        Raises:
            ValueError: If either count is less than 1
        """
        if car_count is None:
            car_count = self.config.default_car_count
        if lane_count is None:
            lane_count = self.config.default_lane_count

        if car_count < 1 or lane_count < 1:
            raise ValueError(
                f"Car and lane counts must be positive, got {car_count} cars, "
                f"{lane_count} lanes"
            )

        return self.load_roster(Roster.build(car_count), lane_count)

    def generate_schedule_from_text(self, cars_text: str, lanes_text: str) -> Schedule:
        """Generate a schedule from text box input.

        Args:
            cars_text: Number of cars as typed
            lanes_text: Number of lanes as typed

        Raises:
            ValueError: If either value is not a positive integer
        """
        try:
            car_count = int(cars_text.strip())
            lane_count = int(lanes_text.strip())
        except ValueError:
            raise ValueError(
                f"Car and lane counts must be whole numbers, got {cars_text!r} and "
                f"{lanes_text!r}"
            ) from None
        return self.generate_schedule(car_count, lane_count)

    def load_roster(self, roster: Roster, lane_count: int) -> Schedule:
        """Schedule a caller-supplied roster, discarding any previous race.

        Args:
            roster: Cars in the race
            lane_count: Number of lanes, capped at the roster size

        Returns:
            New schedule
        """
        # Build everything first so a failure leaves the old race intact
        schedule = self.generator.generate(roster, lane_count)
        tracker = ResultsTracker(schedule)

        self._roster = roster
        self._schedule = schedule
        self._tracker = tracker
        self._current_heat = 0

        logger.info(
            "New race: %d cars, %d lanes, %d heats",
            len(roster), schedule.lane_count, len(schedule),
        )
        return schedule

    def set_current_heat(self, heat: int) -> None:
        """Point the session at a heat.

        Args:
            heat: 0 <= heat <= heat count (heat count = finished)

        Raises:
            IndexError: If heat is out of range
        """
        self._require_schedule()
        if not 0 <= heat <= len(self._schedule):
            raise IndexError(
                f"Heat {heat} out of range for {len(self._schedule)} heats"
            )
        self._current_heat = heat
        logger.debug("Current heat set to %d", heat + 1)

    def mark_place(self, lane: int, place: int) -> Result:
        """Record a place in the current heat.

        Args:
            lane: 0-based lane index
            place: Finishing place

        Raises:
            IndexError: If racing is finished or lane is out of range
        """
        if self.is_finished:
            raise IndexError("Racing is finished, no current heat")
        return self._tracker.record_place(self._current_heat, lane, place)

    def advance(self) -> int:
        """Move on to the next heat that has not been run.

        Returns:
            New current heat (heat count when racing is finished)
        """
        self._require_schedule()
        next_heat = self._tracker.identify_next_heat()
        if next_heat is None:
            self.finish_racing()
        else:
            self.set_current_heat(next_heat)
        return self._current_heat

    def finish_racing(self) -> None:
        """Mark racing as finished."""
        self._require_schedule()
        self._current_heat = len(self._schedule)
        logger.info(
            "Racing finished: %d of %d heats complete",
            self._tracker.completed_heat_count, len(self._schedule),
        )

    def run_title(self) -> str:
        """Title for the heat being run, e.g. ``Heat 3 of 12``."""
        if self.is_finished:
            return "Racing finished"
        return f"Heat {self._current_heat + 1} of {len(self._schedule)}"

    def heat_preview(self) -> str:
        """Preview of the heat after the one about to run."""
        self._require_schedule()
        on_deck = self._tracker.identify_heat_on_deck()
        if on_deck is None:
            return "No more heats to run"
        numbers = self._schedule[on_deck].numbers
        return f"Next - Heat {on_deck + 1}: " + ", ".join(numbers)

    def schedule_summary(self) -> str:
        """Whole schedule, one heat per line."""
        return "\n".join(self.schedule.summary_lines())

    def standings(self) -> List[Car]:
        """Cars ordered best to worst by the results so far."""
        return calculate_standings(self.roster, self._tracker.heat_results)

    def standings_table(self) -> List[Standing]:
        """Standings with positions and scores."""
        return standings_table(self.roster, self._tracker.heat_results)

    def get_state(self) -> dict:
        """Get complete session state.

        Returns:
            Dictionary with schedule, results and current heat
        """
        if self._schedule is None:
            return {"has_schedule": False}
        return {
            "has_schedule": True,
            "current_heat": self._current_heat,
            "is_finished": self.is_finished,
            "schedule": self._schedule.get_state(),
            "results": self._tracker.get_state(),
        }
