"""Parser for Content Definition Format (CDF) files describing game objects."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .containers import StrDict

_DELIMITERS = re.compile(r"[ \t\r\n\v\f]+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")

_BLOCK_KEYWORDS = frozenset({"events", "a_events", "transitions", "states"})
_RESERVED_NAMES = frozenset({"object", "{", "}", "events", "a_events", "transitions"})
_TOP_LEVEL_IGNORED = frozenset({"{", "}", "events", "a_events", "transitions", "states"})

ROOT_FILE = "root.cdf"
CDF_DIR = "cdf"


class CdfError(ValueError):
    """Raised when CDF text does not follow the format."""


@dataclass
class ObjectTemplate:
    """A named object definition with its float and int properties."""

    name: str
    floats: dict[str, float] = field(default_factory=dict)
    ints: dict[str, int] = field(default_factory=dict)


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    value = int(match.group(0))
    return (value + (1 << 31)) % (1 << 32) - (1 << 31)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens = (token for token in _DELIMITERS.split(text) if token)

    def __iter__(self) -> Iterator[str]:
        return self._tokens

    def next(self) -> str | None:
        return next(self._tokens, None)

    def require(self, what: str) -> str:
        token = self.next()
        if token is None:
            raise CdfError(f"expected {what}, found end of input")
        return token


class CdfParser:
    """Collects object templates from CDF text and files."""

    def __init__(self) -> None:
        self.templates: StrDict[ObjectTemplate] = StrDict()

    def parse_text(self, text: str) -> list[ObjectTemplate]:
        """Parse CDF text, store its objects and return them in order."""
        tokens = _Tokens(text)
        parsed: list[ObjectTemplate] = []
        for token in tokens:
            if token == "object":
                template = self._parse_object(tokens)
                self.templates.add(template.name, template)
                parsed.append(template)
            elif token not in _TOP_LEVEL_IGNORED:
                raise CdfError(f"unexpected token: {token}")
        return parsed

    def parse_file(self, path: str | Path) -> list[ObjectTemplate]:
        """Parse one CDF file."""
        return self.parse_text(Path(path).read_text(encoding="utf-8"))

    def parse_root(self, root_path: str | Path) -> list[ObjectTemplate]:
        """Parse every file listed in ``<root_path>/cdf/root.cdf``, in order."""
        cdf_dir = Path(root_path) / CDF_DIR
        listing = (cdf_dir / ROOT_FILE).read_text(encoding="utf-8")
        parsed: list[ObjectTemplate] = []
        for name in _Tokens(listing):
            parsed.extend(self.parse_file(cdf_dir / name))
        return parsed

    def _parse_object(self, tokens: _Tokens) -> ObjectTemplate:
        name = tokens.require("object name")
        if name in _RESERVED_NAMES:
            raise CdfError(f"unexpected token: {name}")
        if tokens.require("open brace") != "{":
            raise CdfError("expected open brace { after object definition")

        template = ObjectTemplate(name)
        for token in tokens:
            if token == "object":
                raise CdfError("can't define an object within an object")
            if token == "{":
                raise CdfError("unexpected brace {")
            if token == "}":
                break
            if token in _BLOCK_KEYWORDS:
                self._skip_block(tokens, token)
            elif token == "float":
                key = tokens.require("float name")
                template.floats[key] = _atof(tokens.require("float value"))
            elif token == "int":
                key = tokens.require("int name")
                template.ints[key] = _atoi(tokens.require("int value"))
            else:
                raise CdfError(f"unexpected token: {token}")
        return template

    @staticmethod
    def _skip_block(tokens: _Tokens, keyword: str) -> None:
        if tokens.next() != "{":
            raise CdfError(f"expected open brace {{ after {keyword}")
        for token in tokens:
            if token == "}":
                return