from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from .cases import CaseLike, case_snippets
from .config import RuleConfig, TemplateConfig, coerce_config
from .errors import TemplateRenderError
from .naming import RuleName

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "rule.rs.j2"


def _create_environment() -> Environment:
    return Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def _load_template_text(
    *,
    cfg: TemplateConfig,
    base_dir: Optional[Path],
) -> str:
    encoding = cfg.encoding if cfg.encoding else "utf-8"
    if cfg.text:
        return cfg.text

    if cfg.path:
        resolved = cfg.resolve_path(cfg.path, base_dir=base_dir)
        if not resolved.exists():
            raise FileNotFoundError(f"Rule template file not found: {resolved}")

        logger.debug("Loading rule template from %s", resolved)
        return resolved.read_text(encoding=encoding)

    return DEFAULT_TEMPLATE_PATH.read_text(encoding="utf-8")


@dataclass
class RuleRenderer:
    """Render a lint rule source file from a skeleton template."""

    template: Template
    rule: RuleConfig = field(default_factory=RuleConfig)

    @property
    def category(self) -> str:
        return self.rule.category

    @classmethod
    def from_string(
        cls, template_text: str, *, rule: Optional[RuleConfig] = None
    ) -> "RuleRenderer":
        env = _create_environment()
        try:
            template = env.from_string(template_text)
        except TemplateError as exc:
            raise TemplateRenderError(f"Failed to compile rule template: {exc}") from exc
        return cls(template=template, rule=rule or RuleConfig())

    def build_context(
        self,
        rule_name: RuleName,
        *,
        has_filename: bool,
        pass_cases: Iterable[CaseLike],
        fail_cases: Iterable[CaseLike],
    ) -> Dict[str, Any]:
        return {
            "pascal_rule_name": rule_name.pascal,
            "snake_rule_name": rule_name.snake,
            "kebab_rule_name": rule_name.kebab,
            "has_filename": bool(has_filename),
            "pass_cases": case_snippets(pass_cases),
            "fail_cases": case_snippets(fail_cases),
            "category": self.rule.category,
            "category_is_placeholder": self.rule.category_is_placeholder,
        }

    def render(
        self,
        rule_name: str | RuleName,
        has_filename: bool = False,
        pass_cases: Optional[Iterable[CaseLike]] = None,
        fail_cases: Optional[Iterable[CaseLike]] = None,
    ) -> str:
        """Render the rule source for ``rule_name``.

        Case entries that are plain strings are embedded verbatim, so callers
        must supply snippets that are already valid literals.

        Raises :class:`~rulegen.errors.InvalidIdentifier` when ``rule_name``
        cannot be converted to a type name.
        """

        name = rule_name if isinstance(rule_name, RuleName) else RuleName.parse(rule_name)
        context = self.build_context(
            name,
            has_filename=has_filename,
            pass_cases=pass_cases or (),
            fail_cases=fail_cases or (),
        )
        try:
            rendered = self.template.render(context)
        except TemplateError as exc:
            raise TemplateRenderError(
                f"Failed to render rule template for {name.kebab!r}: {exc}"
            ) from exc

        logger.debug(
            "Rendered rule %s (%d pass, %d fail cases, has_filename=%s)",
            name.pascal,
            len(context["pass_cases"]),
            len(context["fail_cases"]),
            context["has_filename"],
        )
        return rendered.rstrip("\n") + "\n"


def create_rule_renderer(
    template_cfg: TemplateConfig | Mapping[str, Any] | None = None,
    rule_cfg: RuleConfig | Mapping[str, Any] | None = None,
    *,
    base_dir: Optional[Path] = None,
) -> RuleRenderer:
    cfg = coerce_config(template_cfg, TemplateConfig, "template_cfg")
    rule = coerce_config(rule_cfg, RuleConfig, "rule_cfg")
    root = base_dir or cfg.get_config_root()

    text = _load_template_text(cfg=cfg, base_dir=root)
    renderer = RuleRenderer.from_string(text, rule=rule)
    logger.debug(
        "Created rule renderer using template (%d chars, category=%s)",
        len(text),
        rule.category,
    )
    return renderer


@lru_cache(maxsize=1)
def default_renderer() -> RuleRenderer:
    return create_rule_renderer()


def render(
    rule_name: str | RuleName,
    has_filename: bool = False,
    pass_cases: Optional[Iterable[CaseLike]] = None,
    fail_cases: Optional[Iterable[CaseLike]] = None,
) -> str:
    """Render ``rule_name`` with the bundled template and default category."""

    return default_renderer().render(
        rule_name,
        has_filename=has_filename,
        pass_cases=pass_cases,
        fail_cases=fail_cases,
    )


__all__ = [
    "DEFAULT_TEMPLATE_PATH",
    "RuleRenderer",
    "create_rule_renderer",
    "default_renderer",
    "render",
]
