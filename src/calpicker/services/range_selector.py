"""Two-click range selection.

Range selection is always a fresh two-click gesture:

    EMPTY        --click d-->  DateRange(d, d)            (PENDING_END)
    PENDING_END  --click d-->  DateRange(min, max)        (COMPLETE, or PENDING_END if same day)
    COMPLETE     --click d-->  DateRange(d, d)            (PENDING_END)

The state is never stored; it is derived from the shape of the current range.
Multi-date mode bypasses the state machine and appends every click.
"""

import logging
from datetime import date

from calpicker.exceptions import SelectionModeError
from calpicker.models import DateList, DateRange, RangeState, Selection
from calpicker.services.date_utils import as_date, as_selection, is_date_before, is_same_day

logger = logging.getLogger(__name__)


def range_state(date_range: DateRange | None) -> RangeState:
    if not isinstance(date_range, DateRange):
        return RangeState.EMPTY
    if is_same_day(date_range.start, date_range.end):
        return RangeState.PENDING_END
    return RangeState.COMPLETE


def get_new_range(current_range: DateRange | None, clicked: date) -> DateRange:
    """Apply one click to the current range and return the next range."""
    clicked = as_date(clicked)
    state = range_state(current_range)

    if state is RangeState.PENDING_END:
        start = as_date(current_range.start)
        if is_date_before(clicked, start):
            new_range = DateRange(start=clicked, end=start)
        else:
            new_range = DateRange(start=start, end=clicked)
    else:
        new_range = DateRange(start=clicked, end=clicked)

    logger.debug("Range click %s: %s -> %s", clicked, state.value, new_range)
    return new_range


def handle_date_click(
    selection: Selection,
    clicked: date,
    *,
    allow_range: bool = False,
    multi_date: bool = False,
) -> Selection:
    """Dispatch a day click to the active selection mode.

    - multi_date: append to the existing list (no de-duplication, no sorting)
    - allow_range: two-click range transition
    - neither: always a one-day range of the clicked date

    A selection whose shape does not belong to the active mode is treated
    as absent.
    """
    if allow_range and multi_date:
        raise SelectionModeError("allow_range and multi_date cannot both be enabled")

    clicked = as_date(clicked)
    selection = as_selection(selection)

    if multi_date:
        dates = selection if isinstance(selection, DateList) else DateList()
        return dates.append(clicked)

    if allow_range and isinstance(selection, DateRange):
        return get_new_range(selection, clicked)
    return get_new_range(None, clicked)
