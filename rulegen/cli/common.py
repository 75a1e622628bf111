from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from rulegen.config import AppConfig, load_config
from rulegen.errors import UnknownRuleKind
from rulegen.kinds import RuleKind, parse_rule_kind


def _kind_callback(value: Optional[str]) -> Optional[RuleKind]:
    if value is None:
        return None
    try:
        return parse_rule_kind(value)
    except UnknownRuleKind as exc:
        raise typer.BadParameter(str(exc)) from exc


ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    resolve_path=True,
    path_type=Path,
    help="Path to a TOML configuration file. Defaults are used when omitted.",
)

KindOption = typer.Option(
    None,
    "--kind",
    "-k",
    callback=_kind_callback,
    help="Rule kind (plugin). Defaults to rule.kind in the configuration.",
)


def load_app_config(config_path: Optional[Path]) -> tuple[AppConfig, Path]:
    """Return the configuration and the base path for relative outputs."""

    if config_path is None:
        return AppConfig(), Path.cwd()
    config_path = config_path.resolve()
    return load_config(config_path), config_path.parent


__all__ = [
    "AppConfig",
    "ConfigOption",
    "KindOption",
    "load_app_config",
]
