"""
RacingWeb command line tool

Generates a heat schedule, optionally records finish line results from
a file, and prints the standings.

Usage:
    racingweb                              # 12 cars, 4 lanes
    racingweb --cars 8 --lanes 3           # Round-robin schedule
    racingweb --results places.json        # Record places, show standings
    racingweb --export ./race_data         # Write CSV/JSON files
"""

from pathlib import Path
from typing import List, Optional
import argparse
import json
import logging
import sys

from racingweb.config import RaceConfig
from racingweb.export.exporter import ExporterConfig, RaceExporter
from racingweb.session.session import RaceSession

logger = logging.getLogger(__name__)


def setup_logging(config: RaceConfig) -> None:
    """Configure logging."""
    log_format = "%(asctime)s [%(levelname)s] %(message)s"
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=log_format,
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="RacingWeb heat scheduler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Results file format (1-based heat and lane numbers, as printed):
    [[1, 1, 2], [1, 2, 1], [1, 3, 4], [1, 4, 3], ...]
    each entry is [heat, lane, place]
        """
    )

    # Race setup
    setup_group = parser.add_argument_group("Race Setup")
    setup_group.add_argument(
        "--cars",
        type=int,
        default=12,
        help="Number of cars to race (default: 12)"
    )
    setup_group.add_argument(
        "--lanes",
        type=int,
        default=4,
        help="Number of lanes on the track, capped at --cars (default: 4)"
    )
    setup_group.add_argument(
        "--no-table",
        action="store_false",
        dest="use_pregenerated_table",
        help="Always use round-robin generation"
    )
    setup_group.add_argument(
        "--no-optimize",
        action="store_false",
        dest="optimize_adjacency",
        help="Keep heats in generated order"
    )

    # Results and output
    parser.add_argument(
        "--results",
        type=Path,
        help="JSON file of [heat, lane, place] placements to record"
    )
    parser.add_argument(
        "--export",
        type=Path,
        metavar="DIR",
        help="Write schedule, results and standings files to DIR"
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Log file path (in addition to stdout)"
    )

    return parser.parse_args(argv)


def load_placements(path: Path) -> List[List[int]]:
    """Read placements from a results file.

    Raises:
        ValueError: If the file is not a list of [heat, lane, place]
    """
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of [heat, lane, place]")

    placements = []
    for entry in data:
        if (
            not isinstance(entry, list)
            or len(entry) != 3
            or not all(isinstance(value, int) for value in entry)
        ):
            raise ValueError(f"{path}: bad placement {entry!r}")
        placements.append(entry)
    return placements


def print_standings(session: RaceSession) -> None:
    """Print the standings table."""
    print("\nStandings")
    for standing in session.standings_table():
        print(f"  {standing.position:>3}. {standing.car.label:<20} {standing.score:>5}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = RaceConfig(
        default_car_count=max(args.cars, 1),
        default_lane_count=max(args.lanes, 1),
        use_pregenerated_table=args.use_pregenerated_table,
        optimize_adjacency=args.optimize_adjacency,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    if args.export:
        config.export_dir = args.export
    setup_logging(config)

    session = RaceSession(config)
    try:
        session.generate_schedule(args.cars, args.lanes)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(session.schedule_summary())

    if args.results:
        try:
            for heat, lane, place in load_placements(args.results):
                session.tracker.record_place(heat - 1, lane - 1, place)
        except (OSError, ValueError, IndexError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        session.advance()
        print_standings(session)

    if args.export:
        exporter = RaceExporter(ExporterConfig(output_dir=str(config.export_dir)))
        exporter.export_schedule_csv(session.schedule)
        exporter.export_schedule_json(session.schedule)
        exporter.export_results_csv(session.tracker)
        exporter.export_standings_json(session.tracker)
        logger.info("Exported race data to %s", exporter.output_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
