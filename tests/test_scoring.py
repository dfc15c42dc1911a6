"""Basic tests for the RacingWeb scoring module."""

import pytest
import numpy as np

from racingweb.roster.car import Car
from racingweb.roster.roster import Roster, build_roster
from racingweb.schedule.generator import generate_schedule
from racingweb.scoring.results import HeatStatus, Result, ResultsTracker
from racingweb.scoring.standings import (
    calculate_scores,
    calculate_standings,
    standings_table,
)


@pytest.fixture
def tracker():
    """Tracker for 5 cars on 3 lanes (heat 1 = cars 1, 2, 4)."""
    return ResultsTracker(generate_schedule(build_roster(5), 3))


def run_heat(tracker, heat_index):
    for lane in range(tracker.schedule.lane_count):
        tracker.record_place(heat_index, lane, lane + 1)


class TestResultsTracker:
    """Test result recording."""

    def test_initial_state(self, tracker):
        """Test every heat starts pending."""
        assert tracker.heat_count == 5
        assert all(tracker.heat_status(i) is HeatStatus.PENDING for i in range(5))
        assert tracker.heat_results == [[], [], [], [], []]
        assert tracker.completed_heat_count == 0

    def test_record_place(self, tracker):
        """Test a placement references the scheduled car."""
        result = tracker.record_place(0, 1, 2)

        assert result.car is tracker.schedule[0][1]
        assert result.car.number == "2"
        assert result.place == 2

        slots = tracker.get_heat_results(0)
        assert len(slots) == 3
        assert slots[0] is None
        assert slots[1] == result
        assert slots[2] is None

    def test_partial_then_complete(self, tracker):
        """Test heat status transitions."""
        tracker.record_place(0, 0, 1)
        assert tracker.heat_status(0) is HeatStatus.PARTIAL
        assert not tracker.is_heat_complete(0)

        tracker.record_place(0, 1, 2)
        tracker.record_place(0, 2, 3)
        assert tracker.heat_status(0) is HeatStatus.COMPLETE
        assert tracker.is_heat_complete(0)
        assert tracker.completed_heat_count == 1

    def test_clear_heat(self, tracker):
        """Test clearing a complete heat makes it pending again."""
        run_heat(tracker, 2)
        assert tracker.is_heat_complete(2)

        tracker.clear_heat(2)

        assert not tracker.is_heat_complete(2)
        assert tracker.heat_status(2) is HeatStatus.PENDING
        assert tracker.get_heat_results(2) == []

    def test_remark_replaces(self, tracker):
        """Test marking a lane again replaces the place."""
        tracker.record_place(1, 0, 3)
        tracker.record_place(1, 0, 1)

        slots = tracker.get_heat_results(1)
        assert slots[0].place == 1
        assert sum(1 for slot in slots if slot is not None) == 1

    def test_place_not_validated(self, tracker):
        """Test places are opaque scores."""
        result = tracker.record_place(0, 0, 42)
        assert result.place == 42

    @pytest.mark.parametrize("heat_index", [-1, 5, 100])
    def test_heat_index_out_of_range(self, tracker, heat_index):
        """Test out-of-range heats raise without changing state."""
        with pytest.raises(IndexError):
            tracker.record_place(heat_index, 0, 1)
        with pytest.raises(IndexError):
            tracker.clear_heat(heat_index)
        with pytest.raises(IndexError):
            tracker.is_heat_complete(heat_index)
        assert tracker.heat_results == [[], [], [], [], []]

    def test_lane_out_of_range(self, tracker):
        """Test out-of-range lanes raise without allocating slots."""
        with pytest.raises(IndexError):
            tracker.record_place(0, 3, 1)
        assert tracker.get_heat_results(0) == []

    def test_next_heat_and_on_deck(self, tracker):
        """Test next and on-deck heat lookup."""
        assert tracker.identify_next_heat() == 0
        assert tracker.identify_heat_on_deck() == 1

        tracker.record_place(0, 0, 1)
        assert tracker.identify_next_heat() == 1
        assert tracker.identify_heat_on_deck() == 2

        tracker.record_place(2, 0, 1)
        assert tracker.identify_next_heat() == 1
        assert tracker.identify_heat_on_deck() == 3

    def test_last_pending_heat(self, tracker):
        """Test lookups near the end of the race."""
        for heat_index in range(4):
            tracker.record_place(heat_index, 0, 1)

        assert tracker.identify_next_heat() == 4
        assert tracker.identify_heat_on_deck() is None

        tracker.record_place(4, 0, 1)
        assert tracker.identify_next_heat() is None
        assert tracker.identify_heat_on_deck() is None

    def test_reset(self, tracker):
        """Test clearing every heat."""
        run_heat(tracker, 0)
        run_heat(tracker, 1)

        tracker.reset()

        assert tracker.identify_next_heat() == 0
        assert tracker.completed_heat_count == 0

    def test_state(self, tracker):
        """Test tracker state dictionary."""
        tracker.record_place(0, 2, 1)
        state = tracker.get_state()

        assert state["next_heat"] == 1
        assert state["on_deck"] == 2
        assert state["heats"][0] == {"status": "partial", "places": [None, None, 1]}
        assert state["heats"][1] == {"status": "pending", "places": []}


class TestStandings:
    """Test standings calculation."""

    def test_three_car_heat(self):
        """Test ranking by place."""
        roster = Roster.from_cars([Car("A"), Car("B"), Car("C")])
        car_a, car_b, car_c = roster
        heat_results = [[Result(car_b, 1), Result(car_a, 2), Result(car_c, 3)]]

        standings = calculate_standings(roster, heat_results)

        assert standings == [car_b, car_a, car_c]

    def test_idempotent(self, tracker):
        """Test standings don't change without new results."""
        run_heat(tracker, 0)
        run_heat(tracker, 3)
        roster = tracker.schedule.roster

        first = calculate_standings(roster, tracker.heat_results)
        second = calculate_standings(roster, tracker.heat_results)

        assert first == second

    def test_provisional_standings(self, tracker):
        """Test partial results rank cars, ties in roster order."""
        run_heat(tracker, 0)
        roster = tracker.schedule.roster

        scores = calculate_scores(roster, tracker.heat_results)
        standings = calculate_standings(roster, tracker.heat_results)

        assert np.array_equal(scores, [1, 2, 0, 3, 0])
        assert [car.number for car in standings] == ["3", "5", "1", "2", "4"]

    def test_partial_heat_counts(self, tracker):
        """Test incomplete heats still score."""
        tracker.record_place(0, 2, 5)
        roster = tracker.schedule.roster

        scores = calculate_scores(roster, tracker.heat_results)
        assert scores[3] == 5
        assert calculate_standings(roster, tracker.heat_results)[-1] is roster[3]

    def test_all_tied(self, tracker):
        """Test a full race where every car scores the same."""
        for heat_index in range(5):
            run_heat(tracker, heat_index)
        roster = tracker.schedule.roster

        standings = calculate_standings(roster, tracker.heat_results)

        assert standings == list(roster)

    def test_no_results(self):
        """Test standings before any heat."""
        roster = build_roster(4)
        assert calculate_standings(roster, [[], [], [], []]) == list(roster)

    def test_foreign_car(self):
        """Test results for a car off the roster are rejected."""
        roster = build_roster(2)
        with pytest.raises(ValueError):
            calculate_standings(roster, [[Result(Car("1"), 1)]])

    def test_standings_table(self, tracker):
        """Test positions and scores."""
        run_heat(tracker, 0)
        table = standings_table(tracker.schedule.roster, tracker.heat_results)

        assert [row.position for row in table] == [1, 2, 3, 4, 5]
        assert [row.score for row in table] == [0, 0, 1, 2, 3]
        assert table[0].car.number == "3"
        assert isinstance(table[0].score, int)
