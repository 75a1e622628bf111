"""Public package interface for rulegen."""

from .cases import TestCase, load_cases
from .config import (
    AppConfig,
    OutputConfig,
    RuleConfig,
    TemplateConfig,
    coerce_config,
    load_config,
)
from .errors import (
    CaseFileError,
    InvalidIdentifier,
    RulegenError,
    TemplateRenderError,
    UnknownRuleKind,
)
from .kinds import RuleKind, parse_rule_kind
from .naming import RuleName
from .renderer import RuleRenderer, create_rule_renderer, render

__all__ = [
    "AppConfig",
    "CaseFileError",
    "InvalidIdentifier",
    "OutputConfig",
    "RuleConfig",
    "RuleKind",
    "RuleName",
    "RuleRenderer",
    "RulegenError",
    "TemplateConfig",
    "TemplateRenderError",
    "TestCase",
    "UnknownRuleKind",
    "coerce_config",
    "create_rule_renderer",
    "load_cases",
    "load_config",
    "parse_rule_kind",
    "render",
]
