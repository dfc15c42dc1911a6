"""
Heat and schedule data structures.

A heat is one race event with one car per lane. A schedule is the
ordered list of heats generated for a roster.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from racingweb.roster.car import Car
from racingweb.roster.roster import Roster


@dataclass(frozen=True)
class Heat:
    """One race event: lane index -> car."""
    cars: Tuple[Car, ...]

    @property
    def lane_count(self) -> int:
        """Number of lanes in this heat."""
        return len(self.cars)

    @property
    def numbers(self) -> List[str]:
        """Car numbers by lane."""
        return [car.number for car in self.cars]

    def shares_car_with(self, other: "Heat") -> bool:
        """Check if any car races in both heats.

        Args:
            other: Heat to compare with

        Returns:
            True if the heats have a car in common
        """
        return not set(self.cars).isdisjoint(other.cars)

    def __getitem__(self, lane: int) -> Car:
        return self.cars[lane]

    def __len__(self) -> int:
        return len(self.cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self.cars)


@dataclass(frozen=True)
class Schedule:
    """A complete heat schedule for one roster."""
    roster: Roster
    heats: Tuple[Heat, ...]
    lane_count: int

    def __post_init__(self):
        for i, heat in enumerate(self.heats):
            if heat.lane_count != self.lane_count:
                raise ValueError(
                    f"Heat {i} has {heat.lane_count} lanes, expected {self.lane_count}"
                )

    @property
    def heat_count(self) -> int:
        return len(self.heats)

    def get_heat(self, heat_index: int) -> Heat:
        """Get a heat by index.

        Args:
            heat_index: 0-based heat index

        Returns:
            The heat

        Raises:
            IndexError: If heat_index is out of range
        """
        if not 0 <= heat_index < len(self.heats):
            raise IndexError(
                f"Heat index {heat_index} out of range for {len(self.heats)} heats"
            )
        return self.heats[heat_index]

    def get_heats_for_car(self, car: Car) -> List[int]:
        """Indices of all heats a car races in."""
        return [i for i, heat in enumerate(self.heats) if car in heat.cars]

    def summary_lines(self) -> List[str]:
        """Lines like ``Heat 1: 1 2 4``, one per heat."""
        return [
            f"Heat {i + 1}: " + " ".join(heat.numbers)
            for i, heat in enumerate(self.heats)
        ]

    def __getitem__(self, heat_index: int) -> Heat:
        return self.heats[heat_index]

    def __len__(self) -> int:
        return len(self.heats)

    def __iter__(self) -> Iterator[Heat]:
        return iter(self.heats)

    def get_state(self) -> dict:
        """Get schedule state.

        Returns:
            Dictionary with heat lineups by car number
        """
        return {
            "car_count": len(self.roster),
            "lane_count": self.lane_count,
            "heats": [heat.numbers for heat in self.heats],
        }
