import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

# Module loggers are configured at import time, before any fixture runs.
os.environ.setdefault(
    "CLOCKHANDS_LOG_DIR", str(Path(tempfile.gettempdir()) / "clockhands-test-logs")
)


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_clock_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CLOCKHANDS_SMOOTHING",
        "CLOCKHANDS_SMOOTHING_FACTOR",
        "CLOCKHANDS_HOUR_DIAL",
        "CLOCKHANDS_MAX_FPS",
        "CLOCKHANDS_WINDOW_WIDTH",
        "CLOCKHANDS_WINDOW_HEIGHT",
        "CLOCKHANDS_COUNTER_THREADS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
