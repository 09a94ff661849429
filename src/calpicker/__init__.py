"""Calendar month grid and date-range selection engine."""

from calpicker.models import (
    DateList,
    DateRange,
    DayCell,
    DayFlags,
    DisabledConfig,
    MonthView,
    RangeState,
    Selection,
    Weekday,
    WeekGrid,
)
from calpicker.services.cell_classifier import build_month_view, classify_day
from calpicker.services.date_utils import (
    date_is_in_range,
    date_is_selected,
    is_date_after,
    is_date_before,
    is_date_disabled,
    is_day_disabled,
    is_same_day,
)
from calpicker.services.range_selector import get_new_range, handle_date_click, range_state
from calpicker.services.week_grid import get_ordered_weekdays, get_weeks_for_month

__all__ = [
    "DateList",
    "DateRange",
    "DayCell",
    "DayFlags",
    "DisabledConfig",
    "MonthView",
    "RangeState",
    "Selection",
    "WeekGrid",
    "Weekday",
    "build_month_view",
    "classify_day",
    "date_is_in_range",
    "date_is_selected",
    "get_new_range",
    "get_ordered_weekdays",
    "get_weeks_for_month",
    "handle_date_click",
    "is_date_after",
    "is_date_before",
    "is_date_disabled",
    "is_day_disabled",
    "is_same_day",
    "range_state",
]
