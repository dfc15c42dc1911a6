"""Basic tests for the RacingWeb session module."""

import pytest

from racingweb.config import RaceConfig
from racingweb.roster.car import Car
from racingweb.roster.roster import Roster
from racingweb.scoring.results import HeatStatus
from racingweb.session.session import RaceSession


def run_current_heat(session, places=None):
    lane_count = session.current_lineup.lane_count
    places = places or range(1, lane_count + 1)
    for lane, place in enumerate(places):
        session.mark_place(lane, place)


class TestConfig:
    """Test race configuration."""

    def test_defaults(self):
        """Test default setup matches the setup form."""
        config = RaceConfig()

        assert config.default_car_count == 12
        assert config.default_lane_count == 4
        assert config.generator_config.use_pregenerated_table
        assert config.generator_config.optimize_adjacency

    def test_normalization(self):
        """Test string paths and log level are normalized."""
        config = RaceConfig(export_dir="out", log_file="race.log", log_level="debug")

        assert config.export_dir.name == "out"
        assert config.log_file.name == "race.log"
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError):
            RaceConfig(log_level="LOUD")

    def test_invalid_defaults(self):
        """Test non-positive defaults are rejected."""
        with pytest.raises(ValueError):
            RaceConfig(default_car_count=0)


class TestRaceSession:
    """Test race session."""

    def test_session_creation(self):
        """Test session starts without a schedule."""
        session = RaceSession()

        assert not session.has_schedule
        assert session.get_state() == {"has_schedule": False}
        with pytest.raises(RuntimeError):
            session.schedule
        with pytest.raises(RuntimeError):
            session.advance()

    def test_default_schedule(self):
        """Test config defaults are used."""
        session = RaceSession()
        schedule = session.generate_schedule()

        assert len(schedule) == 12
        assert schedule.lane_count == 4
        assert session.current_heat == 0

    def test_generate_schedule(self):
        """Test schedule generation and display text."""
        session = RaceSession()
        session.generate_schedule(5, 3)

        assert session.run_title() == "Heat 1 of 5"
        assert session.heat_preview() == "Next - Heat 2: 2, 3, 5"
        assert session.schedule_summary().splitlines()[0] == "Heat 1: 1 2 4"
        assert session.current_lineup.numbers == ["1", "2", "4"]

    def test_lane_count_capped(self):
        """Test lanes are capped at the number of cars."""
        session = RaceSession()
        schedule = session.generate_schedule(3, 8)
        assert schedule.lane_count == 3

    @pytest.mark.parametrize("cars,lanes", [(0, 4), (5, 0), (-1, -1)])
    def test_invalid_counts(self, cars, lanes):
        """Test invalid counts are rejected."""
        session = RaceSession()
        with pytest.raises(ValueError):
            session.generate_schedule(cars, lanes)
        assert not session.has_schedule

    def test_failed_generation_keeps_race(self):
        """Test a rejected setup leaves the current race alone."""
        session = RaceSession()
        schedule = session.generate_schedule(5, 3)
        session.mark_place(0, 1)

        with pytest.raises(ValueError):
            session.generate_schedule(0, 3)

        assert session.schedule is schedule
        assert session.tracker.heat_status(0) is HeatStatus.PARTIAL

    def test_generate_from_text(self):
        """Test text box input."""
        session = RaceSession()
        schedule = session.generate_schedule_from_text(" 8 ", "4")

        assert len(schedule) == 8
        assert schedule.lane_count == 4

    @pytest.mark.parametrize("cars_text,lanes_text", [("abc", "4"), ("8", ""), ("2.5", "2")])
    def test_generate_from_bad_text(self, cars_text, lanes_text):
        """Test unparsable input is rejected."""
        session = RaceSession()
        with pytest.raises(ValueError):
            session.generate_schedule_from_text(cars_text, lanes_text)

    def test_run_full_race(self):
        """Test running every heat to the end."""
        session = RaceSession()
        session.generate_schedule(5, 3)

        for expected_heat in range(5):
            assert session.current_heat == expected_heat
            run_current_heat(session)
            session.advance()

        assert session.is_finished
        assert session.current_heat == 5
        assert session.current_lineup is None
        assert session.run_title() == "Racing finished"
        assert session.heat_preview() == "No more heats to run"
        assert session.tracker.completed_heat_count == 5

    def test_mark_place_after_finish(self):
        """Test no heat can be marked once finished."""
        session = RaceSession()
        session.generate_schedule(2, 2)
        session.finish_racing()

        with pytest.raises(IndexError):
            session.mark_place(0, 1)

    def test_preview_after_heat_started(self):
        """Test preview skips the next pending heat."""
        session = RaceSession()
        session.generate_schedule(5, 3)
        session.mark_place(0, 1)

        assert session.heat_preview() == "Next - Heat 3: 3, 4, 1"

    def test_advance_skips_run_heats(self):
        """Test advance goes to the lowest heat without results."""
        session = RaceSession()
        session.generate_schedule(5, 3)
        session.tracker.record_place(1, 0, 1)
        run_current_heat(session)

        assert session.advance() == 2

    def test_set_current_heat(self):
        """Test heat pointer bounds."""
        session = RaceSession()
        session.generate_schedule(4, 2)

        session.set_current_heat(3)
        assert session.current_heat == 3

        session.set_current_heat(4)
        assert session.is_finished

        with pytest.raises(IndexError):
            session.set_current_heat(5)
        with pytest.raises(IndexError):
            session.set_current_heat(-1)

    def test_regenerate_discards_results(self):
        """Test a new schedule starts every heat pending."""
        session = RaceSession()
        session.generate_schedule(5, 3)
        run_current_heat(session)
        session.advance()

        session.generate_schedule(6, 3)

        assert session.current_heat == 0
        assert len(session.roster) == 6
        assert all(
            session.tracker.heat_status(i) is HeatStatus.PENDING
            for i in range(len(session.schedule))
        )

    def test_standings(self):
        """Test standings from the first heat."""
        session = RaceSession()
        session.generate_schedule(5, 3)
        run_current_heat(session)

        assert [car.number for car in session.standings()] == ["3", "5", "1", "2", "4"]
        assert session.standings_table()[-1].score == 3

    def test_load_roster(self):
        """Test scheduling named cars."""
        cars = [Car("7", "Comet"), Car("11", "Bolt"), Car("3", "Dart")]
        session = RaceSession()
        schedule = session.load_roster(Roster.from_cars(cars), 2)

        assert session.roster[0] is cars[0]
        assert schedule.summary_lines()[0] == "Heat 1: 7 11"

    def test_table_can_be_disabled(self):
        """Test config switches generation to round-robin."""
        session = RaceSession(RaceConfig(use_pregenerated_table=False, optimize_adjacency=False))
        schedule = session.generate_schedule(8, 4)
        assert schedule[0].numbers == ["1", "2", "4", "7"]

    def test_state(self):
        """Test session state dictionary."""
        session = RaceSession()
        session.generate_schedule(5, 3)
        state = session.get_state()

        assert state["has_schedule"]
        assert state["current_heat"] == 0
        assert not state["is_finished"]
        assert state["schedule"]["heats"][0] == ["1", "2", "4"]
        assert state["results"]["next_heat"] == 0
