"""
Shortcode matching and attribute parsing.

A shortcode is one of::

    [name attrs]            open tag, no body
    [name attrs /]          self-closing
    [name attrs]body[/name] enclosing
    [[name ...]]            escaped, rendered as the literal [name ...]

All registered names are folded into one pattern so a single scan finds every
occurrence. Nested occurrences of the *same* name are not supported: the body
of ``[a][a][/a][/a]`` ends at the first ``[/a]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Optional, Pattern, Tuple, Union

Attributes = Dict[Union[str, int], str]

_SHORTCODE_TEMPLATE = (
    r"\["
    r"(?P<open>\[?)"  # extra [ for escaping: [[tag]]
    r"(?P<name>{names})"
    r"(?![\w-])"
    r"(?P<attrs>"  # everything up to ] or /]
    r"[^\]/]*"
    r"(?:/(?!\])[^\]/]*)*?"
    r")"
    r"(?:"
    r"(?P<self_closing>/)\]"
    r"|"
    r"\]"
    r"(?:"
    r"(?P<content>"  # body, up to the matching close tag
    r"[^\[]*"
    r"(?:\[(?!/(?P=name)\])[^\[]*)*"
    r")"
    r"\[/(?P=name)\]"
    r")?"
    r")"
    r"(?P<close>\]?)"  # extra ] for escaping: [[tag]]
)

_ATTR_PATTERN = re.compile(
    r"""(\w+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|(\w+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|(\w+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r"""|"([^"]*)"(?:\s|$)"""
    r"""|(\S+)(?:\s|$)"""
)

_INVISIBLE_SPACE = re.compile("[\u00a0\u200b]+")

_C_ESCAPE = re.compile(r"\\(?:([0-7]{1,3})|x([0-9A-Fa-f]{1,2})|(.))", re.DOTALL)
_C_SIMPLE = {"a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}


@dataclass(frozen=True)
class ShortcodeMatch:
    """One shortcode occurrence found in text."""

    open: str
    name: str
    attrs: str
    self_closing: bool
    content: Optional[str]
    close: str
    raw: str

    @classmethod
    def from_match(cls, match: "re.Match[str]") -> "ShortcodeMatch":
        return cls(
            open=match.group("open"),
            name=match.group("name"),
            attrs=match.group("attrs"),
            self_closing=match.group("self_closing") is not None,
            content=match.group("content"),
            close=match.group("close"),
            raw=match.group(0),
        )

    @property
    def escaped(self) -> bool:
        return self.open == "[" and self.close == "]"

    @property
    def unescaped(self) -> str:
        """The match with one layer of ``[[ ]]`` removed."""
        return self.raw[1:-1]


@lru_cache(maxsize=32)
def _compile(names: Tuple[str, ...]) -> Pattern[str]:
    alternation = "|".join(re.escape(name) for name in names) or "(?!)"
    return re.compile(_SHORTCODE_TEMPLATE.format(names=alternation), re.DOTALL)


def build_pattern(names: Iterable[str]) -> Pattern[str]:
    """Compile (or fetch from cache) the pattern matching any of ``names``."""
    return _compile(tuple(names))


def find_shortcodes(text: str, names: Iterable[str]) -> Iterator[ShortcodeMatch]:
    """Yield top-level shortcode occurrences in source order."""
    for match in build_pattern(names).finditer(text):
        yield ShortcodeMatch.from_match(match)


def strip_c_slashes(value: str) -> str:
    """Undo C-style backslash escapes (``\\n``, ``\\101``, ``\\x41``, ``\\"``)."""

    def _replace(match: "re.Match[str]") -> str:
        octal, hexa, char = match.groups()
        if octal:
            return chr(int(octal, 8) & 0xFF)
        if hexa:
            return chr(int(hexa, 16))
        return _C_SIMPLE.get(char, char)

    return _C_ESCAPE.sub(_replace, value)


def parse_attrs(text: str) -> Union[Attributes, str]:
    """
    Parse a shortcode attribute list.

    ``name="v"``, ``name='v'`` and ``name=v`` are stored under the lower-cased
    name; standalone ``"v"`` and ``v`` are stored under 0, 1, 2... in order of
    appearance. Text with no recognizable token comes back as the left-trimmed
    string rather than a dict.
    """
    text = _INVISIBLE_SPACE.sub(" ", text)
    matches = list(_ATTR_PATTERN.finditer(text))
    if not matches:
        return text.lstrip()

    attrs: Attributes = {}
    position = 0
    for m in matches:
        if m.group(1):
            attrs[m.group(1).lower()] = strip_c_slashes(m.group(2))
        elif m.group(3):
            attrs[m.group(3).lower()] = strip_c_slashes(m.group(4))
        elif m.group(5):
            attrs[m.group(5).lower()] = strip_c_slashes(m.group(6))
        elif m.group(7):
            attrs[position] = strip_c_slashes(m.group(7))
            position += 1
        elif m.group(8) is not None:
            attrs[position] = strip_c_slashes(m.group(8))
            position += 1
    return attrs
