"""Dev-mode diagnostics printed alongside command output."""

from __future__ import annotations

import traceback
from typing import Any, Mapping

import click

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger(__name__)


def in_dev_mode(config: BaseConfig | None) -> bool:
    return bool(getattr(config, "DEV_MODE", False)) if config is not None else False


def _format_context(context: Mapping[str, Any]) -> str:
    pairs = []
    for key, value in context.items():
        if isinstance(value, float):
            value = f"{value:,.2f}"
        pairs.append(f"{key}={value}")
    return " ".join(pairs)


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: Exception | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Echo a ``[dev]`` line to stderr and record it at debug level.

    Does nothing unless dev mode is on. Floats in ``context`` are shown with
    two decimals; the debug record keeps the raw values under ``context``.
    """

    if not in_dev_mode(config):
        return

    line = f"[dev] {message}"
    if context:
        line = f"{line} ({_format_context(context)})"
    click.echo(click.style(line, dim=True), err=True)
    logger.debug(message, extra={"context": dict(context or {})}, exc_info=exc)
    if exc is not None:
        click.echo("".join(traceback.format_exception(exc)), err=True)
