from datetime import date

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from calpicker.models import DisabledConfig


class PickerConfig(BaseSettings):
    """Picker 설정. .env 파일 또는 CALPICKER_* 환경변수에서 로드."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CALPICKER_",
        extra="ignore",
    )

    # 그리드 맨 왼쪽 열의 요일 (0 = Sunday)
    week_starts_on: int = Field(default=0, ge=0, le=6)

    # 선택 모드. 둘 다 False면 단일 날짜 선택.
    allow_range: bool = False
    multi_date: bool = False

    # 접근성 라벨 prefix (first, last)
    first_label_prefix: str | None = None
    last_label_prefix: str = ""

    # 비활성 날짜
    disable_dates_before: date | None = None
    disable_dates_after: date | None = None
    disable_specific_dates: list[date] = []

    @model_validator(mode="after")
    def _check_single_mode(self) -> "PickerConfig":
        if self.allow_range and self.multi_date:
            raise ValueError("allow_range and multi_date cannot both be enabled")
        return self

    # ── 파생 값 ──

    @property
    def disabled_config(self) -> DisabledConfig:
        return DisabledConfig(
            before=self.disable_dates_before,
            after=self.disable_dates_after,
            explicit=tuple(self.disable_specific_dates),
        )

    @property
    def accessibility_label_prefixes(self) -> tuple[str | None, str]:
        return self.first_label_prefix, self.last_label_prefix
