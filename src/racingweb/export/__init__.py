"""
Export module - Write race data to CSV and JSON.
"""

from racingweb.export.exporter import ExporterConfig, NumpyEncoder, RaceExporter

__all__ = [
    "ExporterConfig",
    "NumpyEncoder",
    "RaceExporter",
]
