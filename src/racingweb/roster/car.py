"""
Car - A race participant.

A car is a plain identity record. Schedules and results hold references
to the roster's cars, so equality and hashing are by object identity:
two cars that happen to share a number are still different cars.
"""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Car:
    """A race participant."""
    number: str                # Alphanumeric car number (required)
    name: str = ""             # Car name ("" = unspecified)
    driver: str = ""           # Driver name ("" = unspecified)

    def __post_init__(self):
        # Numbered cars come from a 1-based sequence index
        if isinstance(self.number, int):
            object.__setattr__(self, "number", str(self.number))

    @property
    def label(self) -> str:
        """Display label, e.g. ``#7 Blue Lightning``."""
        if self.name:
            return f"#{self.number} {self.name}"
        return f"#{self.number}"

    def get_state(self) -> dict:
        return {
            "number": self.number,
            "name": self.name,
            "driver": self.driver,
        }
