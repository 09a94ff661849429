"""캘린더 날짜 비교/분류 유틸리티.

모든 함수는 순수 함수이며 None 입력에 대해 예외 대신 False를 반환한다.
month 인자는 0-indexed (0 = January)다.
"""

import calendar
from collections.abc import Iterable
from datetime import date, datetime

from calpicker.exceptions import DateParseError
from calpicker.models import DateList, DateRange, DisabledConfig, Selection, Weekday

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

WEEKDAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


def as_date(value: date | None) -> date | None:
    """datetime → date. 시각 정보는 버린다."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: str) -> date:
    """'2026-10-18' → date."""
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise DateParseError(str(value)) from e


def as_selection(value) -> Selection:
    """list/tuple of dates → DateList. 그 외는 그대로."""
    if isinstance(value, (list, tuple)):
        return DateList(tuple(as_date(d) for d in value))
    return value


# ── 비교 ──


def is_same_day(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return as_date(a) == as_date(b)


def is_date_before(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return as_date(a) < as_date(b)


def is_date_after(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return as_date(a) > as_date(b)


def date_is_selected(day: date | None, selection: Selection) -> bool:
    """range 모드: start 또는 end와 같은 날. list 모드: 멤버 중 하나와 같은 날."""
    if day is None:
        return False
    selection = as_selection(selection)
    if isinstance(selection, DateRange):
        return is_same_day(day, selection.start) or is_same_day(day, selection.end)
    if isinstance(selection, DateList):
        return any(is_same_day(day, d) for d in selection.dates)
    return False


def date_is_in_range(day: date | None, date_range: DateRange | None) -> bool:
    """start <= day <= end (양끝 포함). degenerate 범위는 내부가 없다."""
    if day is None or not isinstance(date_range, DateRange):
        return False
    if is_same_day(date_range.start, date_range.end):
        return False
    return not is_date_before(day, date_range.start) and not is_date_after(day, date_range.end)


def is_date_disabled(day: date | None, disabled_dates: Iterable[date] | None) -> bool:
    """명시적 비활성 목록 포함 여부. 객체 동일성이 아닌 같은 날 비교."""
    if day is None or not disabled_dates:
        return False
    return any(is_same_day(day, d) for d in disabled_dates)


def is_day_disabled(day: date | None, config: DisabledConfig | None) -> bool:
    if day is None or config is None:
        return False
    return (
        is_date_before(day, config.before)
        or is_date_after(day, config.after)
        or is_date_disabled(day, config.explicit)
    )


# ── 월/요일 계산 ──


def weekday_of(day: date) -> Weekday:
    """Sunday = 0 기준 요일."""
    return Weekday((as_date(day).weekday() + 1) % 7)


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(year, month + 1)[1]


def last_day_of_month(month: int, year: int) -> date:
    return date(year, month + 1, days_in_month(month, year))


def get_next_display_month(month: int) -> int:
    return 0 if month == 11 else month + 1


def get_next_display_year(month: int, year: int) -> int:
    return year + 1 if month == 11 else year


def get_previous_display_month(month: int) -> int:
    return 11 if month == 0 else month - 1


def get_previous_display_year(month: int, year: int) -> int:
    return year - 1 if month == 0 else year


def month_name(month: int) -> str:
    """번역 키. 0 → 'january'."""
    return MONTH_NAMES[month]


def weekday_name(weekday: int) -> str:
    """번역 키. 0 → 'sunday'."""
    return WEEKDAY_NAMES[weekday]
