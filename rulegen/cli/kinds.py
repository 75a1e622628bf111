from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from rulegen.kinds import RuleKind

from .app import app
from .common import ConfigOption, load_app_config


@app.command("kinds")
def kinds_command(config: Optional[Path] = ConfigOption) -> None:
    """List known rule kinds and the directory each one writes to."""

    config_obj, _ = load_app_config(config)
    for kind in RuleKind:
        marker = "*" if kind.value == config_obj.rule.kind else " "
        typer.echo(f"{marker} {kind.value:<12} {config_obj.output.rules_dir}/{kind.rules_dir}")
