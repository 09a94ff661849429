import os

import pytest

from calpicker.config import PickerConfig
from calpicker.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _use_test_env(monkeypatch):
    """모든 테스트에서 .env 대신 .env.test를 사용하고 CALPICKER_* 환경변수를 비운다."""
    monkeypatch.setattr(
        PickerConfig, "model_config", {**PickerConfig.model_config, "env_file": ".env.test"}
    )
    for key in list(os.environ):
        if key.startswith("CALPICKER_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_logging_state():
    """setup_logging의 idempotent guard가 테스트 간에 새지 않도록 초기화."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def range_config() -> PickerConfig:
    """range 모드, 월요일 시작."""
    return PickerConfig(
        allow_range=True,
        week_starts_on=1,
        first_label_prefix="Start",
        last_label_prefix="End",
    )
