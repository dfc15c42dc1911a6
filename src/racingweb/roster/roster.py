"""
Roster - The ordered list of cars taking part in a race.

Provides:
- Roster building from a car count
- Roster building from host-supplied cars
- Identity lookup of a car's roster position
"""

from typing import Iterable, Iterator, List, Sequence, overload

from racingweb.roster.car import Car


class Roster(Sequence[Car]):
    """Ordered, immutable sequence of cars indexed 0..N-1.

    A roster is created once per schedule generation and replaced as a
    whole when a new schedule is generated. Everything else refers to
    its cars by reference.

    Usage:
        roster = Roster.build(12)
        first = roster[0]          # Car(number="1")
    """

    def __init__(self, cars: Iterable[Car]):
        """Initialize roster.

        Args:
            cars: Cars in roster order

        Raises:
            ValueError: If no cars are given
        """
        self._cars: tuple = tuple(cars)
        if not self._cars:
            raise ValueError("A roster needs at least one car")

        # Identity-hashed, so equal-looking cars get distinct positions
        self._positions = {car: i for i, car in enumerate(self._cars)}

    @classmethod
    def build(cls, car_count: int) -> "Roster":
        """Build a roster of numbered cars.

        Args:
            car_count: Number of cars (must be positive)

        Returns:
            Roster with cars numbered "1".."car_count"
        """
        if car_count < 1:
            raise ValueError(f"Car count must be at least 1, got {car_count}")
        return cls(Car(number=i + 1) for i in range(car_count))

    @classmethod
    def from_cars(cls, cars: Iterable[Car]) -> "Roster":
        """Build a roster from cars supplied by the caller."""
        return cls(cars)

    @property
    def cars(self) -> tuple:
        """Cars in roster order."""
        return self._cars

    @property
    def numbers(self) -> List[str]:
        """Car numbers in roster order."""
        return [car.number for car in self._cars]

    def index_of(self, car: Car) -> int:
        """Roster position of a car.

        Args:
            car: Car to look up (compared by identity)

        Returns:
            0-based roster index

        Raises:
            ValueError: If the car is not on this roster
        """
        try:
            return self._positions[car]
        except KeyError:
            raise ValueError(f"Car {car.number} is not on the roster") from None

    def __contains__(self, car: object) -> bool:
        return car in self._positions

    @overload
    def __getitem__(self, index: int) -> Car: ...

    @overload
    def __getitem__(self, index: slice) -> tuple: ...

    def __getitem__(self, index):
        return self._cars[index]

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self._cars)

    def __repr__(self) -> str:
        return f"Roster({len(self._cars)} cars)"

    def get_state(self) -> dict:
        """Get roster state.

        Returns:
            Dictionary with roster data
        """
        return {
            "car_count": len(self._cars),
            "cars": [car.get_state() for car in self._cars],
        }


def build_roster(car_count: int) -> Roster:
    """Build a roster of ``car_count`` numbered cars.

    Args:
        car_count: Number of cars (must be positive)

    Returns:
        New roster

    Raises:
        ValueError: If car_count < 1
    """
    return Roster.build(car_count)
