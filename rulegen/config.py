from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, Type, TypeVar

import tomllib

from .kinds import RuleKind, parse_rule_kind
from .naming import RuleName

PLACEHOLDER_CATEGORY = "nursery"


@dataclass
class RuleConfig:
    """Defaults applied to every generated rule."""

    kind: str = RuleKind.ESLINT.value
    category: str = PLACEHOLDER_CATEGORY

    def __post_init__(self) -> None:
        self.kind = parse_rule_kind(self.kind).value
        category = str(self.category).strip()
        if not category:
            raise ValueError("Rule 'category' must be a non-empty string")
        self.category = category

    @property
    def category_is_placeholder(self) -> bool:
        return self.category == PLACEHOLDER_CATEGORY


@dataclass
class TemplateConfig:
    """Where to find the rule skeleton template."""

    path: Optional[str] = None
    text: Optional[str] = None
    encoding: str = "utf-8"
    _config_root: Optional[Path] = field(default=None, repr=False, compare=False)

    def set_config_root(self, root: Optional[Path]) -> None:
        """Record the directory used to resolve relative template paths."""

        self._config_root = root

    def get_config_root(self) -> Optional[Path]:
        return self._config_root

    def resolve_path(self, template_path: str, *, base_dir: Optional[Path] = None) -> Path:
        """Resolve ``template_path`` relative to ``base_dir`` or the config root."""

        candidate = Path(template_path)
        if candidate.is_absolute():
            return candidate

        root = base_dir or self._config_root or Path.cwd()
        return (root / candidate).resolve()


@dataclass
class OutputConfig:
    """Where generated rule files are written."""

    rules_dir: str = "crates/oxc_linter/src/rules"
    overwrite: bool = False

    def resolve_rule_path(
        self,
        kind: RuleKind | str,
        rule_name: RuleName,
        base_path: Optional[Path] = None,
    ) -> Path:
        base = base_path or Path.cwd()
        rules_root = Path(self.rules_dir)
        if not rules_root.is_absolute():
            rules_root = base / rules_root
        return rules_root / parse_rule_kind(kind).rules_dir / f"{rule_name.snake}.rs"


@dataclass
class AppConfig:
    """Full application configuration tree."""

    rule: RuleConfig = field(default_factory=RuleConfig)
    template: TemplateConfig = field(default_factory=TemplateConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _coerce_section(section: Mapping[str, Any] | None, cls: type[Any]) -> Any:
    if section is None:
        return cls()
    if not isinstance(section, Mapping):
        raise TypeError(f"Expected a mapping for {cls.__name__}, got {type(section)!r}")
    kwargs: MutableMapping[str, Any] = dict(section)
    return cls(**kwargs)


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from a TOML file."""

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as fh:
        raw: Mapping[str, Any] = tomllib.load(fh)

    app_config = AppConfig(
        rule=_coerce_section(raw.get("rule"), RuleConfig),
        template=_coerce_section(raw.get("template"), TemplateConfig),
        output=_coerce_section(raw.get("output"), OutputConfig),
    )

    app_config.template.set_config_root(config_path.parent)

    return app_config


T = TypeVar("T")


def coerce_config(config: Any, cls: Type[T], label: str) -> T:
    """Normalise arbitrary configuration inputs into dataclass instances."""

    if config is None:
        return cls()
    if isinstance(config, cls):
        return config
    if isinstance(config, Mapping):
        return cls(**config)
    raise TypeError(
        f"{label} must be a {cls.__name__} or a mapping of keyword arguments"
    )


__all__ = [
    "AppConfig",
    "OutputConfig",
    "PLACEHOLDER_CATEGORY",
    "RuleConfig",
    "TemplateConfig",
    "coerce_config",
    "load_config",
]
