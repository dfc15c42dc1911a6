"""
Race Configuration

Configuration settings for a race session and the command line tool.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from racingweb.schedule.generator import GeneratorConfig


@dataclass
class RaceConfig:
    """Configuration for a race session."""

    # Setup defaults (used when a count is not given)
    default_car_count: int = 12
    default_lane_count: int = 4

    # Schedule generation
    use_pregenerated_table: bool = True
    optimize_adjacency: bool = True

    # Export
    export_dir: Path = field(default_factory=lambda: Path("./race_data"))

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def generator_config(self) -> GeneratorConfig:
        """Schedule generator settings."""
        return GeneratorConfig(
            use_pregenerated_table=self.use_pregenerated_table,
            optimize_adjacency=self.optimize_adjacency,
        )

    def __post_init__(self):
        """Validate and normalize configuration."""
        if isinstance(self.export_dir, str):
            self.export_dir = Path(self.export_dir)
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

        self.log_level = self.log_level.upper()
        if not isinstance(getattr(logging, self.log_level, None), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

        if self.default_car_count < 1 or self.default_lane_count < 1:
            raise ValueError("Default car and lane counts must be positive")
