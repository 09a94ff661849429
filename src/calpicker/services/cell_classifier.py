"""셀 단위 선택 상태 분류 + 한 달 뷰 조립.

classify_day()는 렌더러가 쓰는 플래그만 계산하고, 텍스트/마크업은 만들지 않는다.
build_month_view()는 그리드를 한 번 만들고 모든 칸을 분류한다.
"""

import logging
from datetime import date

from calpicker.config import PickerConfig
from calpicker.models import (
    DateList,
    DateRange,
    DayCell,
    DayFlags,
    DisabledConfig,
    MonthView,
    Selection,
    WeekdayHeader,
)
from calpicker.services.date_utils import (
    as_date,
    as_selection,
    date_is_in_range,
    date_is_selected,
    is_date_after,
    is_date_before,
    is_day_disabled,
    is_same_day,
    last_day_of_month,
    month_name,
    weekday_name,
    weekday_of,
)
from calpicker.services.week_grid import get_ordered_weekdays, get_weeks_for_month

logger = logging.getLogger(__name__)


def _range_is_different(selection: Selection, multi_date: bool) -> bool:
    """1일 범위가 아니면 True. multi-date 모드에서는 항상 False."""
    if multi_date:
        return False
    if isinstance(selection, DateRange):
        return not is_same_day(selection.start, selection.end)
    return True


def _label_prefix(
    flags: DayFlags,
    allow_range: bool,
    prefixes: tuple[str | None, str | None],
) -> str | None:
    first, last = prefixes
    if allow_range:
        if flags.is_first_selected_day:
            return first
        if flags.is_last_selected_day:
            return last or None
        return None
    if flags.selected and first:
        return first
    return None


def classify_day(
    day: date | None,
    selection: Selection,
    *,
    hover_date: date | None = None,
    disabled: DisabledConfig | None = None,
    allow_range: bool = False,
    multi_date: bool = False,
    focused_date: date | None = None,
    accessibility_label_prefixes: tuple[str | None, str | None] = (None, ""),
) -> DayFlags:
    """Derive every per-cell flag for one grid slot.

    An empty slot (day is None) gets all flags False. Range-only flags
    (in_range, first/last day, hovering range) require allow_range and a
    DateRange selection.
    """
    if day is None:
        return DayFlags()

    day = as_date(day)
    hover_date = as_date(hover_date)
    selection = as_selection(selection)

    flags = DayFlags(
        disabled=is_day_disabled(day, disabled),
        selected=date_is_selected(day, selection),
        range_is_different=_range_is_different(selection, multi_date),
        focused=is_same_day(day, focused_date),
        hovering_right=is_date_before(day, hover_date),
    )

    if allow_range and isinstance(selection, DateRange):
        start, end = selection.start, selection.end
        flags.in_range = date_is_in_range(day, selection)
        flags.is_first_selected_day = is_same_day(day, start)

        if is_same_day(start, end):
            # 두 번째 클릭 전: hover 위치까지 미리보기
            flags.is_last_selected_day = (
                is_date_after(hover_date, start)
                and is_same_day(day, hover_date)
                and not flags.is_first_selected_day
            )
            flags.in_hovering_range = (
                hover_date is not None
                and is_date_after(day, start)
                and not is_date_after(day, hover_date)
            )
        else:
            flags.is_last_selected_day = is_same_day(day, end)

    flags.accessibility_label_prefix = _label_prefix(
        flags, allow_range, accessibility_label_prefixes
    )
    return flags


def build_month_view(
    month: int,
    year: int,
    *,
    config: PickerConfig,
    now: date,
    selection: Selection = None,
    hover_date: date | None = None,
    focused_date: date | None = None,
    disabled: DisabledConfig | None = None,
) -> MonthView:
    """한 달 렌더 패스. month는 0-indexed, now는 호출자가 주입한다."""
    now = as_date(now)
    selection = as_selection(selection)
    if disabled is None:
        disabled = config.disabled_config

    if config.multi_date and isinstance(selection, DateRange):
        logger.warning("DateRange selection ignored in multi-date mode")
        selection = None
    elif not config.multi_date and isinstance(selection, DateList):
        logger.warning("DateList selection ignored outside multi-date mode")
        selection = None

    current = now.year == year and now.month == month + 1
    ordered = get_ordered_weekdays(config.week_starts_on)

    weekdays = [
        WeekdayHeader(
            weekday=wd,
            name=weekday_name(wd),
            current=current and weekday_of(now) == wd,
        )
        for wd in ordered
    ]

    weeks: list[list[DayCell]] = []
    for week in get_weeks_for_month(month, year, config.week_starts_on):
        row = []
        for index, day in enumerate(week):
            flags = classify_day(
                day,
                selection,
                hover_date=hover_date,
                disabled=disabled,
                allow_range=config.allow_range,
                multi_date=config.multi_date,
                focused_date=focused_date,
                accessibility_label_prefixes=config.accessibility_label_prefixes,
            )
            row.append(DayCell(day=day, weekday=ordered[index], flags=flags))
        weeks.append(row)

    return MonthView(
        month=month,
        year=year,
        name=month_name(month),
        current=current,
        last_day_of_month=last_day_of_month(month, year),
        weekdays=weekdays,
        weeks=weeks,
    )
