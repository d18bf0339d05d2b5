"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back on junk."""

    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "fincalc"
    EXPORT_DIRNAME = "exports"
    PAID_OFF_THRESHOLD = 0.01
    DEFAULT_MAX_MONTHS = 600

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("FINCALC_DEV_MODE", default=True)
        self.MAX_MONTHS = _env_int("FINCALC_MAX_MONTHS", self.DEFAULT_MAX_MONTHS)
        self.CURRENCY_SYMBOL = os.getenv("FINCALC_CURRENCY_SYMBOL", "$")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports live."""

        data_root = os.getenv("FINCALC_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def export_dir(self) -> Path:
        """Return (and create) the folder CSV/PNG exports are written to."""

        path = Path(self.DATA_DIR) / self.EXPORT_DIRNAME
        path.mkdir(parents=True, exist_ok=True)
        return path

    def format_money(self, amount: float) -> str:
        """Render an amount with the configured currency symbol."""

        sign = "-" if amount < 0 else ""
        return f"{sign}{self.CURRENCY_SYMBOL}{abs(amount):,.2f}"


class DevConfig(BaseConfig):
    """Development configuration with verbose console output."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; never writes outside DATA_DIR."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self, data_dir: Path | str | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)
            self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.DEV_MODE = False
