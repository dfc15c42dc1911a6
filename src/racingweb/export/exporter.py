"""
Race exporter - Export schedules, results and standings to files.

Provides:
- CSV export of the schedule and results
- JSON export of the schedule and standings
"""

from dataclasses import dataclass
from typing import Any, Dict, List
from pathlib import Path
import json
import csv
import numpy as np

from racingweb.schedule.heat import Schedule
from racingweb.scoring.results import ResultsTracker
from racingweb.scoring.standings import calculate_scores, standings_table


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "./race_data"
    include_metadata: bool = True


class RaceExporter:
    """Export race data to files.

    Writes formats that spreadsheets and other tools can read.
    """

    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.

        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()

        # Ensure output directory exists
        self._output_path = Path(self.config.output_dir)
        self._output_path.mkdir(parents=True, exist_ok=True)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def export_schedule_csv(
        self,
        schedule: Schedule,
        filename: str = "schedule.csv",
    ) -> Path:
        """Export the schedule as one row per heat.

        Args:
            schedule: Schedule to export
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f)

            header = ["heat"] + [f"lane_{lane + 1}" for lane in range(schedule.lane_count)]
            writer.writerow(header)

            for i, heat in enumerate(schedule.heats):
                writer.writerow([i + 1] + heat.numbers)

        return output_file

    def export_schedule_json(
        self,
        schedule: Schedule,
        filename: str = "schedule.json",
    ) -> Path:
        """Export the schedule with the roster.

        Args:
            schedule: Schedule to export
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename

        data: Dict[str, Any] = {
            "metadata": {
                "car_count": len(schedule.roster),
                "lane_count": schedule.lane_count,
                "heat_count": len(schedule),
            } if self.config.include_metadata else {},
            "roster": [car.get_state() for car in schedule.roster],
            "heats": [heat.numbers for heat in schedule.heats],
        }

        with open(output_file, 'w') as f:
            json.dump(data, f, indent=2)

        return output_file

    def export_results_csv(
        self,
        tracker: ResultsTracker,
        filename: str = "results.csv",
    ) -> Path:
        """Export every recorded result as one row.

        Args:
            tracker: Results to export
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(["heat", "lane", "car", "place"])

            for i, slots in enumerate(tracker.heat_results):
                for lane, result in enumerate(slots):
                    if result is None:
                        continue
                    writer.writerow([i + 1, lane + 1, result.car.number, result.place])

        return output_file

    def export_standings_json(
        self,
        tracker: ResultsTracker,
        filename: str = "standings.json",
    ) -> Path:
        """Export the standings.

        Args:
            tracker: Results to rank
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename
        roster = tracker.schedule.roster
        heat_results = tracker.heat_results

        rows: List[Dict[str, Any]] = [
            {
                "position": standing.position,
                **standing.car.get_state(),
                "score": standing.score,
            }
            for standing in standings_table(roster, heat_results)
        ]

        data: Dict[str, Any] = {"standings": rows}
        if self.config.include_metadata:
            data["metadata"] = {
                "heat_count": tracker.heat_count,
                "completed_heats": tracker.completed_heat_count,
                "scores": calculate_scores(roster, heat_results),
            }

        with open(output_file, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        return output_file
