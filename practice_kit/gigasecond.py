"""Adding a gigasecond to a moment in time."""

from datetime import datetime, timedelta

_GIGASECOND = timedelta(seconds=1_000_000_000)


def add_gigasecond(moment: datetime) -> datetime:
    """Return ``moment`` plus 10**9 seconds, dropping fractions of a second."""
    return moment.replace(microsecond=0) + _GIGASECOND