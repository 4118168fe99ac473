import pytest

from infrastructure.logging_config import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    # Keeps stdout free of log lines so console output can be compared exactly.
    setup_logging(level="WARNING", force_json=True)
