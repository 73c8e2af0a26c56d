"""Order price computation.

Pure functions only: the callers fetch line items from the store and pass
them in, nothing here touches the database or the payment processor.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from hotel_api.domain.value_objects.stay_range import StayRange


@dataclass(frozen=True)
class PricedLineItem:
    start_date: date | str
    end_date: date | str
    nightly_rate: int  # minor currency units


def nights_between(start_date: object, end_date: object) -> int:
    """Whole nights between two dates; 0 for inverted or unreadable input."""
    stay = StayRange.parse(start_date, end_date)
    if stay is None:
        return 0
    return stay.nights


def line_item_price(item: PricedLineItem) -> int:
    return nights_between(item.start_date, item.end_date) * item.nightly_rate


def compute_price(line_items: Iterable[PricedLineItem]) -> int:
    """Total of ``nights * nightly_rate`` over all items, in minor currency units."""
    return sum(line_item_price(item) for item in line_items)
