"""
Clock abstraction for timestamping self-check runs.

The self-check stamps every saved result row, and names its output file, with
the time of the run. Asking an injected clock for "now" instead of calling
datetime.now() directly lets tests pin that timestamp and assert on file names
and CSV contents exactly.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything with a ``now()`` returning a timezone-aware datetime."""

    def now(self) -> datetime:
        ...


class RealClock:
    """Clock backed by the system time, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that returns the same timestamp on every call.

    **Usage**:
        clock = FrozenClock(datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc))
        run_self_check(..., clock=clock)  # report named ..._20240301T093000Z.csv
    """

    def __init__(self, fixed_now: datetime):
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now


def format_run_stamp(moment: datetime) -> str:
    """
    Render a datetime as a compact UTC stamp for file names: YYYYMMDDTHHMMSSZ.

    Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
