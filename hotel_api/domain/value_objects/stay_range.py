"""Value Object StayRange - check-in / check-out dates of a room line item."""

from dataclasses import dataclass
from datetime import date, datetime


def _as_date(value: object) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class StayRange:
    """
    Immutable range of calendar dates for one room.

    The start date is inclusive and the end date exclusive, so a single
    night has ``end == start + 1 day``. Unlike a booking window an inverted
    range is not rejected here: it simply covers zero nights.

    Attributes:
        start: Check-in date.
        end: Check-out date.
    """

    start: date
    end: date

    @property
    def nights(self) -> int:
        """Whole nights covered by the range, never negative."""
        return max(0, (self.end - self.start).days)

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"

    @classmethod
    def parse(cls, start: object, end: object) -> "StayRange | None":
        """Build a range from dates, datetimes or ISO strings; None if either side is unreadable."""
        start_date = _as_date(start)
        end_date = _as_date(end)
        if start_date is None or end_date is None:
            return None
        return cls(start=start_date, end=end_date)
