#!/usr/bin/env python3
"""
RacingWeb Runner

Generate a heat schedule and score a race from the command line.

Usage:
    python run_race.py                     # 12 cars, 4 lanes
    python run_race.py --cars 8 --lanes 3
    python run_race.py --help              # Show all options
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from racingweb.cli import main


if __name__ == "__main__":
    sys.exit(main())
