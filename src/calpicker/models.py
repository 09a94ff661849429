"""Picker 엔진 데이터 모델 및 직렬화 유틸리티."""

import json
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum, IntEnum


# ── 요일 / 날짜 범위 ──


class Weekday(IntEnum):
    """요일 인덱스. Sunday = 0 (week_starts_on과 같은 규약)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True)
class DateRange:
    """선택된 시작/종료일. start <= end는 호출자가 보장한다."""

    start: date
    end: date

    @property
    def is_degenerate(self) -> bool:
        """start == end: 두 번째 클릭을 기다리는 1일 범위."""
        return self.start == self.end


@dataclass(frozen=True)
class DateList:
    """multi-date 모드 선택. 클릭 순서 그대로, 중복 허용."""

    dates: tuple[date, ...] = ()

    def append(self, day: date) -> "DateList":
        return DateList(self.dates + (day,))

    def __len__(self) -> int:
        return len(self.dates)


# DateRange | DateList | None — 한 인스턴스에서 모드를 섞지 않는다.
Selection = DateRange | DateList | None

# 주 x 7칸. None은 해당 월 밖의 빈 칸.
WeekGrid = list[list[date | None]]


class RangeState(str, Enum):
    """range 선택 상태. 저장하지 않고 DateRange 모양에서 유도한다."""

    EMPTY = "empty"
    PENDING_END = "pending_end"
    COMPLETE = "complete"


@dataclass(frozen=True)
class DisabledConfig:
    """비활성 날짜 규칙. before 이전, after 이후, explicit에 포함된 날."""

    before: date | None = None
    after: date | None = None
    explicit: tuple[date, ...] = ()


# ── 셀 분류 결과 ──


@dataclass
class DayFlags:
    """렌더러에 넘기는 셀 단위 플래그. 모두 advisory."""

    disabled: bool = False
    selected: bool = False
    in_range: bool = False
    in_hovering_range: bool = False
    is_first_selected_day: bool = False
    is_last_selected_day: bool = False
    range_is_different: bool = False
    focused: bool = False
    hovering_right: bool = False
    accessibility_label_prefix: str | None = None


@dataclass
class DayCell:
    """그리드 한 칸. day가 None이면 레이아웃용 빈 칸."""

    day: date | None
    weekday: Weekday
    flags: DayFlags = field(default_factory=DayFlags)


@dataclass
class WeekdayHeader:
    weekday: Weekday
    name: str  # 번역 키, e.g. "sunday"
    current: bool = False


@dataclass
class MonthView:
    """한 달 렌더 패스의 결과. month는 0-indexed."""

    month: int
    year: int
    name: str  # 번역 키, e.g. "january"
    current: bool
    last_day_of_month: date
    weekdays: list[WeekdayHeader] = field(default_factory=list)
    weeks: list[list[DayCell]] = field(default_factory=list)


# ── 직렬화 유틸리티 ──


def _serialize(obj):
    """date/enum JSON 직렬화 헬퍼."""
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def to_dict(obj) -> dict | None:
    """dataclass → dict. date/enum 값은 그대로 둔다."""
    if obj is None:
        return None
    return asdict(obj)


def dump_json(obj, indent: int | None = 2) -> str:
    """dataclass 또는 list[dataclass]를 JSON 문자열로 변환."""
    payload = to_dict(obj) if not isinstance(obj, list) else [asdict(o) for o in obj]
    return json.dumps(payload, ensure_ascii=False, indent=indent, default=_serialize)


# ── dict → dataclass 복원 팩토리 ──


def _date_from(value) -> date:
    return value if isinstance(value, date) else date.fromisoformat(value)


def selection_from_dict(d: dict | None) -> Selection:
    """dict → Selection 복원. {"start", "end"} 또는 {"dates": [...]}."""
    if not d:
        return None
    if "dates" in d:
        return DateList(tuple(_date_from(v) for v in d["dates"]))
    return DateRange(start=_date_from(d["start"]), end=_date_from(d["end"]))
