# settings.py
import os
from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


class Settings:
    """Configurações da aplicação (env vars)."""

    def __init__(self):
        # — Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
        self.LOG_JSON = _env_bool("LOG_JSON", False)

        # — Demo
        self.DEMO_PAUSE_ON_EXIT = _env_bool("DEMO_PAUSE_ON_EXIT", True)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()


settings = Settings()
