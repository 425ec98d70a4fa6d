"""Utility constants for intervalgebra.

Step constants are `timedelta` adjacency units for temporal domains,
e.g. ``instants.with_step(SECOND)``.
"""

from datetime import timedelta

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)
