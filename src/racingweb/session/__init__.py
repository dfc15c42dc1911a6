"""
Session module - Race state from setup to standings.
"""

from racingweb.session.session import RaceSession

__all__ = ["RaceSession"]
