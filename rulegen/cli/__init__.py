from __future__ import annotations

from .app import app

# Import command modules so they register with the shared Typer application.
from . import new as _new  # noqa: F401
from . import kinds as _kinds  # noqa: F401

__all__ = ["app", "main"]


def main() -> None:
    app()
