"""Example test cases embedded in generated rule tests."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from .errors import CaseFileError
from .utils import ensure_file_exists

logger = logging.getLogger(__name__)


def rust_raw_string(text: str) -> str:
    """Quote ``text`` as a Rust raw string literal that ``text`` cannot close."""

    hashes = 1
    while f'"{"#" * hashes}' in text:
        hashes += 1
    fence = "#" * hashes
    return f'r{fence}"{text}"{fence}'


_RUST_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def rust_string(text: str) -> str:
    """Quote ``text`` as an escaped Rust string literal."""

    parts: list[str] = []
    for char in text:
        escaped = _RUST_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or 0x7F <= ord(char) < 0xA0:
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def _rust_json(value: Any) -> str:
    # Body of a serde_json::json! invocation; strings must be Rust literals.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot embed non-finite number {value!r} in a test case")
        return repr(value)
    if isinstance(value, str):
        return rust_string(value)
    if isinstance(value, Mapping):
        items = sorted((str(key), item) for key, item in value.items())
        body = ", ".join(f"{rust_string(key)}: {_rust_json(item)}" for key, item in items)
        return "{" + body + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_rust_json(item) for item in value) + "]"
    raise TypeError(f"Cannot embed {type(value).__name__} in a test case")


def _json_macro(value: Any) -> str:
    return f"serde_json::json!({_rust_json(value)})"


def _reject_constant(name: str) -> Any:
    raise CaseFileError(f"Case file contains unsupported number {name}")


@dataclass(frozen=True)
class TestCase:
    """A single pass or fail example for a generated rule test."""

    __test__ = False

    code: str
    options: Any = None
    settings: Any = None
    filename: Optional[str] = None

    @property
    def has_filename(self) -> bool:
        return bool(self.filename)

    def to_rust(self) -> str:
        """Return the Rust snippet used inside the ``pass``/``fail`` vectors."""

        # Raw strings cannot hold a carriage return.
        code = rust_string(self.code) if "\r" in self.code else rust_raw_string(self.code)
        if self.settings is None and not self.has_filename:
            if self.options is None:
                return code
            return f"({code}, Some({_json_macro(self.options)}))"

        options = "None" if self.options is None else f"Some({_json_macro(self.options)})"
        settings = "None" if self.settings is None else f"Some({_json_macro(self.settings)})"
        filename = (
            f"Some(PathBuf::from({rust_string(self.filename)}))"
            if self.has_filename
            else "None"
        )
        return f"({code}, {options}, {settings}, {filename})"

    @classmethod
    def from_raw(cls, raw: Union[str, Mapping[str, Any]]) -> "TestCase":
        if isinstance(raw, str):
            return cls(code=raw)
        if not isinstance(raw, Mapping):
            raise CaseFileError(
                f"Test case must be a string or an object, got {type(raw).__name__}"
            )
        unknown = set(raw) - {"code", "options", "settings", "filename"}
        if unknown:
            raise CaseFileError(
                f"Test case has unknown keys: {', '.join(sorted(unknown))}"
            )
        code = raw.get("code")
        if not isinstance(code, str):
            raise CaseFileError("Test case object is missing a string 'code'")
        filename = raw.get("filename")
        if filename is not None and not isinstance(filename, str):
            raise CaseFileError("Test case 'filename' must be a string")
        return cls(
            code=code,
            options=raw.get("options"),
            settings=raw.get("settings"),
            filename=filename or None,
        )


CaseLike = Union[str, TestCase]


def case_snippets(cases: Optional[Iterable[CaseLike]]) -> list[str]:
    """Convert ``cases`` to the literal snippets embedded in the template.

    Plain strings are passed through verbatim; :class:`TestCase` objects are
    rendered with :meth:`TestCase.to_rust`.
    """

    snippets: list[str] = []
    for case in cases or ():
        if isinstance(case, TestCase):
            snippets.append(case.to_rust())
        elif isinstance(case, str):
            snippets.append(case)
        else:
            raise TypeError(
                f"Expected a string or TestCase, got {type(case).__name__}"
            )
    return snippets


def any_filename(*groups: Sequence[CaseLike]) -> bool:
    return any(
        isinstance(case, TestCase) and case.has_filename
        for group in groups
        for case in group
    )


def _parse_group(raw: Mapping[str, Any], key: str) -> list[TestCase]:
    items = raw.get(key, [])
    if items is None:
        return []
    if not isinstance(items, list):
        raise CaseFileError(f"Case file '{key}' must be a list")
    return [TestCase.from_raw(item) for item in items]


def load_cases(path: Path, encoding: str = "utf-8") -> tuple[list[TestCase], list[TestCase]]:
    """Load ``(pass_cases, fail_cases)`` from a JSON case file."""

    ensure_file_exists(path, "case file")
    try:
        text = path.read_text(encoding=encoding)
    except LookupError as exc:
        raise CaseFileError(f"Unknown case file encoding {encoding!r}") from exc
    except UnicodeDecodeError as exc:
        raise CaseFileError(f"Case file {path} is not valid {encoding}: {exc}") from exc

    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise CaseFileError(f"Case file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, Mapping):
        raise CaseFileError("Case file must contain an object with 'pass' and 'fail' lists")

    pass_cases = _parse_group(raw, "pass")
    fail_cases = _parse_group(raw, "fail")
    logger.debug(
        "Loaded %d pass and %d fail cases from %s",
        len(pass_cases),
        len(fail_cases),
        path,
    )
    return pass_cases, fail_cases


__all__ = [
    "CaseLike",
    "TestCase",
    "any_filename",
    "case_snippets",
    "load_cases",
    "rust_raw_string",
    "rust_string",
]
