"""fincalc: personal finance calculators and projection engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig

__version__ = "0.3.0"

__all__ = ["BaseConfig", "DevConfig", "__version__"]
