from __future__ import annotations

from typing import Optional


class RulegenError(Exception):
    """Base error for rule scaffolding failures."""


class InvalidIdentifier(RulegenError, ValueError):
    """Raised when a rule name cannot be turned into an identifier."""

    def __init__(self, rule_name: str, reason: str) -> None:
        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Invalid rule name {rule_name!r}: {reason}")


class UnknownRuleKind(RulegenError, ValueError):
    """Raised when a rule kind is not one of the known plugins."""

    def __init__(self, kind: str, suggestion: Optional[str] = None) -> None:
        self.kind = kind
        self.suggestion = suggestion
        message = f"Unknown rule kind: {kind!r}"
        if suggestion:
            message = f"{message} (did you mean {suggestion!r}?)"
        super().__init__(message)


class CaseFileError(RulegenError, ValueError):
    """Raised when a test case file is malformed."""


class TemplateRenderError(RulegenError):
    """Raised when a rule template fails to render."""
