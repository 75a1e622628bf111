"""Known rule kinds (linter plugins) and where their rules live."""

from __future__ import annotations

from enum import Enum

from .errors import UnknownRuleKind
from .string_similarity import closest_match


class RuleKind(str, Enum):
    ESLINT = "eslint"
    TYPESCRIPT = "typescript"
    JEST = "jest"
    VITEST = "vitest"
    UNICORN = "unicorn"
    IMPORT = "import"
    REACT = "react"
    REACT_PERF = "react-perf"
    JSX_A11Y = "jsx-a11y"
    NEXTJS = "nextjs"
    JSDOC = "jsdoc"
    NODE = "node"
    PROMISE = "promise"
    OXC = "oxc"

    @property
    def rules_dir(self) -> str:
        """Directory (relative to the rules root) holding rules of this kind."""

        return self.value.replace("-", "_")


def parse_rule_kind(value: str | RuleKind) -> RuleKind:
    """Resolve ``value`` to a :class:`RuleKind`, accepting ``_`` for ``-``."""

    if isinstance(value, RuleKind):
        return value
    text = str(value).strip().lower().replace("_", "-")
    try:
        return RuleKind(text)
    except ValueError:
        suggestion = closest_match(text, [kind.value for kind in RuleKind])
        raise UnknownRuleKind(str(value), suggestion) from None


__all__ = ["RuleKind", "parse_rule_kind"]
