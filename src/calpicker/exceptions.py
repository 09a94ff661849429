"""calpicker 예외 계층.

계층 구조:
    CalPickerError
    ├── ConfigError         (설정: .env / CALPICKER_* 값 검증 실패)
    ├── DateParseError      (CLI/설정: YYYY-MM-DD 파싱 실패)
    └── SelectionModeError  (range 모드와 multi-date 모드 동시 요청)

엔진 함수(비교/그리드/분류)는 입력이 없을 때 예외 대신 False를 반환한다.
"""


class CalPickerError(Exception):
    """calpicker의 모든 예외의 기반 클래스."""


class ConfigError(CalPickerError):
    """PickerConfig 로드 또는 검증 실패."""


class DateParseError(CalPickerError):
    """날짜 문자열을 CalendarDate로 변환하지 못함."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date '{value}' (expected YYYY-MM-DD)")


class SelectionModeError(CalPickerError):
    """한 picker 인스턴스에서 range와 multi-date 모드를 섞으려 함."""
