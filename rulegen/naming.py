"""Rule name parsing and identifier casing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidIdentifier

_SEPARATOR_RE = re.compile(r"[\W_]+")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")

# Type names that cannot be declared as a unit struct.
_RESERVED_TYPE_NAMES = frozenset({"Self"})


def split_words(value: str) -> list[str]:
    """Split ``value`` into words on separators and camelCase boundaries."""

    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(value):
        if not chunk:
            continue
        words.extend(part for part in _CAMEL_BOUNDARY_RE.split(chunk) if part)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(value: str) -> str:
    return "".join(_capitalize(word) for word in split_words(value))


def to_snake_case(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def to_kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


@dataclass(frozen=True)
class RuleName:
    """A validated rule name together with its derived casings."""

    raw: str
    pascal: str
    snake: str
    kebab: str

    @classmethod
    def parse(cls, value: str) -> "RuleName":
        """Parse ``value`` or raise :class:`InvalidIdentifier`."""

        if not isinstance(value, str):
            raise InvalidIdentifier(repr(value), "rule name must be a string")
        text = value.strip()
        if not text:
            raise InvalidIdentifier(value, "rule name is empty")

        pascal = to_pascal_case(text)
        if not pascal:
            raise InvalidIdentifier(value, "rule name contains no letters or digits")
        if not pascal.isascii() or not _IDENTIFIER_RE.match(pascal):
            raise InvalidIdentifier(
                value, f"{pascal!r} is not a valid identifier"
            )
        if pascal in _RESERVED_TYPE_NAMES:
            raise InvalidIdentifier(value, f"{pascal!r} is a reserved name")

        return cls(
            raw=text,
            pascal=pascal,
            snake=to_snake_case(text),
            kebab=to_kebab_case(text),
        )

    def __str__(self) -> str:
        return self.kebab


__all__ = [
    "RuleName",
    "split_words",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
]
