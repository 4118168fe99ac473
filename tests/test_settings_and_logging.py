"""
Tests for environment configuration and the structlog setup.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from infrastructure.config.settings import Settings
from infrastructure.logging_config import setup_logging
from test_run_employee_demo import EXPECTED_OUTPUT

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_settings_defaults(monkeypatch) -> None:
    for name in ("LOG_LEVEL", "LOG_JSON", "DEMO_PAUSE_ON_EXIT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_JSON is False
    assert settings.DEMO_PAUSE_ON_EXIT is True


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), ("YES", True), ("0", False), ("no", False), ("", True)],
)
def test_pause_flag_parsing(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("DEMO_PAUSE_ON_EXIT", raw)
    assert Settings.from_env().DEMO_PAUSE_ON_EXIT is expected


def test_log_level_is_upper_cased(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings.from_env().LOG_LEVEL == "DEBUG"


def test_setup_logging_accepts_level_names() -> None:
    try:
        setup_logging(level="debug", force_json=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        setup_logging(level="WARNING", force_json=True)


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        setup_logging(level="LOUD")


def _run_unconfigured(code: str) -> subprocess.CompletedProcess:
    env = dict(os.environ, PYTHONPATH=str(REPO_ROOT))
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=REPO_ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )


def test_unconfigured_comparison_writes_only_the_trace_line() -> None:
    completed = _run_unconfigured(
        "from core_domain.entities.employee import Employee\n"
        "Employee(101, 'Sarah', 'Wilson') == Employee(102, 'Emma', 'Davis')\n"
    )
    assert completed.stdout == "Employees are different (IDs: 101 vs 102)\n"


def test_unconfigured_demo_keeps_stdout_to_the_script() -> None:
    completed = _run_unconfigured(
        "from application.use_cases.run_employee_demo import run_employee_demo\n"
        "run_employee_demo()\n"
    )
    assert completed.stdout == EXPECTED_OUTPUT
    assert "Employee validation failed" in completed.stderr
