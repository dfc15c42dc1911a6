"""
Scoring module - Finish line results and standings.

This module contains:
- ResultsTracker: Placements per heat and lane
- calculate_standings: Ranking by lowest total place
"""

from racingweb.scoring.results import HeatStatus, Result, ResultsTracker
from racingweb.scoring.standings import (
    Standing,
    calculate_scores,
    calculate_standings,
    standings_table,
)

__all__ = [
    "HeatStatus",
    "Result",
    "ResultsTracker",
    "Standing",
    "calculate_scores",
    "calculate_standings",
    "standings_table",
]
