"""
Standings - Rank cars by the sum of their finishing places.

Lower totals rank better. Partial heats count, so standings taken
mid-race are provisional.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import numpy as np

from racingweb.roster.car import Car
from racingweb.roster.roster import Roster
from racingweb.scoring.results import Result

HeatResults = Sequence[Sequence[Optional[Result]]]


@dataclass(frozen=True)
class Standing:
    """One row of the standings table."""
    position: int      # 1-based
    car: Car
    score: int


def calculate_scores(roster: Roster, heat_results: HeatResults) -> np.ndarray:
    """Sum every recorded place per car.

    Args:
        roster: Cars in the race
        heat_results: Result slots per heat

    Returns:
        Score per roster position

    Raises:
        ValueError: If a result names a car that is not on the roster
    """
    scores = np.zeros(len(roster), dtype=np.int64)
    for slots in heat_results:
        for result in slots:
            if result is None:
                continue
            scores[roster.index_of(result.car)] += result.place
    return scores


def calculate_standings(roster: Roster, heat_results: HeatResults) -> List[Car]:
    """Rank cars best to worst.

    Ties keep roster order.

    Args:
        roster: Cars in the race
        heat_results: Result slots per heat

    Returns:
        Cars ordered by ascending total place
    """
    scores = calculate_scores(roster, heat_results)
    order = np.argsort(scores, kind="stable")
    return [roster[int(i)] for i in order]


def standings_table(roster: Roster, heat_results: HeatResults) -> List[Standing]:
    """Standings with positions and scores for display."""
    scores = calculate_scores(roster, heat_results)
    order = np.argsort(scores, kind="stable")
    return [
        Standing(position=rank + 1, car=roster[int(i)], score=int(scores[i]))
        for rank, i in enumerate(order)
    ]
