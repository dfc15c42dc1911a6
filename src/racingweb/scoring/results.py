"""
Results tracker - Finish line placements per heat.

Provides:
- Placement recording per heat and lane
- Heat status (pending, partial, complete)
- Next heat / on-deck heat lookup
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging

from racingweb.roster.car import Car
from racingweb.schedule.heat import Schedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """A single finish line result."""
    car: Car
    place: int      # Score contribution; not checked against lane count


class HeatStatus(Enum):
    """Progress of a single heat."""
    PENDING = "pending"      # No results recorded
    PARTIAL = "partial"      # Some lanes recorded
    COMPLETE = "complete"    # Every lane recorded


class ResultsTracker:
    """Finish line results for every heat of a schedule.

    Each heat starts with an empty result list. The first placement
    recorded for a heat allocates one slot per lane.

    Usage:
        tracker = ResultsTracker(schedule)
        tracker.record_place(0, lane=2, place=1)
        tracker.identify_next_heat()
    """

    def __init__(self, schedule: Schedule):
        """Initialize tracker.

        Args:
            schedule: Schedule whose heats are being run
        """
        self.schedule = schedule
        self._results: List[List[Optional[Result]]] = [[] for _ in schedule.heats]

    @property
    def heat_results(self) -> List[List[Optional[Result]]]:
        """Result slots for every heat (empty list = not yet run)."""
        return [list(slots) for slots in self._results]

    @property
    def heat_count(self) -> int:
        return len(self._results)

    @property
    def completed_heat_count(self) -> int:
        """Number of heats with every lane recorded."""
        return sum(1 for i in range(len(self._results)) if self.is_heat_complete(i))

    def _check_heat_index(self, heat_index: int) -> None:
        if not 0 <= heat_index < len(self._results):
            raise IndexError(
                f"Heat index {heat_index} out of range for {len(self._results)} heats"
            )

    def record_place(self, heat_index: int, lane: int, place: int) -> Result:
        """Record the place of the car in one lane of a heat.

        Re-marking a lane replaces the earlier result.

        Args:
            heat_index: 0-based heat index
            lane: 0-based lane index
            place: Finishing place

        Returns:
            The recorded result

        Raises:
            IndexError: If heat_index or lane is out of range
        """
        self._check_heat_index(heat_index)
        heat = self.schedule.heats[heat_index]
        if not 0 <= lane < heat.lane_count:
            raise IndexError(
                f"Lane {lane} out of range for heat with {heat.lane_count} lanes"
            )

        slots = self._results[heat_index]
        if not slots:
            slots.extend([None] * heat.lane_count)

        result = Result(car=heat[lane], place=place)
        slots[lane] = result
        logger.debug(
            "Heat %d lane %d: car %s placed %d",
            heat_index + 1, lane + 1, result.car.number, place,
        )
        return result

    def clear_heat(self, heat_index: int) -> None:
        """Reset a heat to never run.

        Args:
            heat_index: 0-based heat index

        Raises:
            IndexError: If heat_index is out of range
        """
        self._check_heat_index(heat_index)
        self._results[heat_index] = []
        logger.debug("Cleared results for heat %d", heat_index + 1)

    def get_heat_results(self, heat_index: int) -> List[Optional[Result]]:
        """Result slots for one heat.

        Args:
            heat_index: 0-based heat index

        Returns:
            Copy of the lane slots (empty list if the heat has not run)
        """
        self._check_heat_index(heat_index)
        return list(self._results[heat_index])

    def heat_status(self, heat_index: int) -> HeatStatus:
        """Get the progress of a heat."""
        self._check_heat_index(heat_index)
        slots = self._results[heat_index]
        recorded = sum(1 for slot in slots if slot is not None)
        if recorded == 0:
            return HeatStatus.PENDING
        if recorded < len(slots):
            return HeatStatus.PARTIAL
        return HeatStatus.COMPLETE

    def is_heat_complete(self, heat_index: int) -> bool:
        """Check if every lane of a heat has a result.

        Raises:
            IndexError: If heat_index is out of range
        """
        return self.heat_status(heat_index) is HeatStatus.COMPLETE

    def _pending_heats(self) -> List[int]:
        return [
            i for i in range(len(self._results))
            if self.heat_status(i) is HeatStatus.PENDING
        ]

    def identify_next_heat(self) -> Optional[int]:
        """Determine which heat will run next.

        Returns:
            Lowest heat index with no results, or None if every heat
            has at least one
        """
        pending = self._pending_heats()
        return pending[0] if pending else None

    def identify_heat_on_deck(self) -> Optional[int]:
        """Determine which heat runs after the next one.

        Returns:
            Second heat index with no results, or None if fewer than
            two heats are pending
        """
        pending = self._pending_heats()
        return pending[1] if len(pending) > 1 else None

    def reset(self) -> None:
        """Clear every heat."""
        self._results = [[] for _ in self.schedule.heats]

    def get_state(self) -> dict:
        """Get tracker state.

        Returns:
            Dictionary with per-heat status and places by lane
        """
        return {
            "heat_count": len(self._results),
            "completed_heats": self.completed_heat_count,
            "next_heat": self.identify_next_heat(),
            "on_deck": self.identify_heat_on_deck(),
            "heats": [
                {
                    "status": self.heat_status(i).value,
                    "places": [slot.place if slot is not None else None for slot in slots],
                }
                for i, slots in enumerate(self._results)
            ],
        }
