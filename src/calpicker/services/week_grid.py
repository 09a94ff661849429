"""월 → 주 단위 그리드 생성."""

import logging
from datetime import date

from calpicker.models import Weekday, WeekGrid
from calpicker.services.date_utils import days_in_month, weekday_of

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def get_ordered_weekdays(week_starts_on: int = Weekday.SUNDAY) -> list[Weekday]:
    """week_starts_on부터 시작해 7개 요일을 순환 순서로 반환."""
    return [Weekday((week_starts_on + i) % DAYS_PER_WEEK) for i in range(DAYS_PER_WEEK)]


def get_weeks_for_month(month: int, year: int, week_starts_on: int = Weekday.SUNDAY) -> WeekGrid:
    """해당 월의 날짜를 7칸 주 단위로 배치한다.

    month는 0-indexed. 첫 주 앞과 마지막 주 뒤는 None으로 채운다.
    매 호출마다 새 리스트를 반환하므로 캐싱은 호출자 몫이다.
    """
    first = date(year, month + 1, 1)
    leading = (weekday_of(first) - week_starts_on) % DAYS_PER_WEEK

    weeks: WeekGrid = [[None] * leading]
    for day in range(1, days_in_month(month, year) + 1):
        if len(weeks[-1]) == DAYS_PER_WEEK:
            weeks.append([])
        weeks[-1].append(date(year, month + 1, day))

    trailing = DAYS_PER_WEEK - len(weeks[-1])
    weeks[-1].extend([None] * trailing)

    logger.debug(
        "Built grid %04d-%02d (week starts %d): %d weeks, %d leading, %d trailing",
        year,
        month + 1,
        week_starts_on,
        len(weeks),
        leading,
        trailing,
    )
    return weeks
