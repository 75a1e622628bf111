"""Shared Typer application for the ``rulegen`` command line.

Commands render a lint rule skeleton (Rust source plus its test stub) and
either print it or write it under the configured rules directory.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import typer

from rulegen.utils import configure_logging


LOGGER_NAME = "rulegen.cli"


def _resolve_log_level(log_level: Optional[str]) -> int | str:
    if log_level:
        return log_level
    env_level = os.getenv("LOG_LEVEL")
    return env_level if env_level else logging.INFO


def create_app() -> typer.Typer:
    app = typer.Typer(
        help=(
            "Scaffold a new lint rule: a Rust rule declaration with an empty run body "
            "and a test stub filled from pass/fail example cases."
        ),
        no_args_is_help=True,
    )

    @app.callback()
    def _configure_cli(
        log_level: Optional[str] = typer.Option(
            None, help="Python logging level. Defaults to $LOG_LEVEL, then INFO."
        ),
    ) -> None:
        """Configure logging before running any command."""

        try:
            configure_logging(level=_resolve_log_level(log_level))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    return app


logger = logging.getLogger(LOGGER_NAME)

app = create_app()

__all__ = ["app", "logger"]
