"""
Roster module - Race participants.

This module contains:
- Car: Identity record for a single participant
- Roster: Ordered list of cars for one race
"""

from racingweb.roster.car import Car
from racingweb.roster.roster import Roster, build_roster

__all__ = [
    "Car",
    "Roster",
    "build_roster",
]
