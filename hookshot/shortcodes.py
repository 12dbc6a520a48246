"""Shortcode registry and text expansion."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional, Pattern, Union

from .config import ATTRS_FILTER_PREFIX
from .filters import Filters
from .parser import Attributes, ShortcodeMatch, build_pattern, find_shortcodes, parse_attrs

logger = logging.getLogger(__name__)

ShortcodeHandler = Callable[[Union[Attributes, str], Optional[str], str], Any]


class Shortcodes:
    """
    ``[tag attr="value"]body[/tag]`` expansion.

    Each tag has exactly one handler; registering a tag again replaces it.
    Handlers are called as ``handler(attrs, content, tag)`` where ``content``
    is None for tags without a body.
    """

    def __init__(self, filters: Optional[Filters] = None) -> None:
        self.filters = filters if filters is not None else Filters()
        self._tags: Dict[str, ShortcodeHandler] = {}

    def add_shortcode(self, tag: str, handler: ShortcodeHandler) -> bool:
        if not callable(handler):
            logger.debug("Ignoring non-callable shortcode handler for [%s]", tag)
            return False
        self._tags[tag] = handler
        logger.debug("Registered shortcode [%s]", tag)
        return True

    def remove_shortcode(self, tag: str) -> bool:
        return self._tags.pop(tag, None) is not None

    def remove_all_shortcodes(self) -> bool:
        self._tags = {}
        return True

    def shortcode_exists(self, tag: str) -> bool:
        return tag in self._tags

    def has_shortcode(self, content: str, tag: str) -> bool:
        """Whether ``content`` uses ``tag``, including inside other shortcodes' bodies."""
        if "[" not in content or not self.shortcode_exists(tag):
            return False

        for found in find_shortcodes(content, self._tags):
            if found.name == tag:
                return True
            if found.content and self.has_shortcode(found.content, tag):
                return True
        return False

    def shortcode_regex(self) -> Pattern[str]:
        return build_pattern(self._tags)

    def do_shortcode(self, content: str) -> str:
        """
        Replace every registered shortcode in ``content`` with its handler's output.

        ``[[tag]]`` is an escape and comes out as the literal ``[tag]``.
        """
        if not self._tags:
            return content
        return self.shortcode_regex().sub(self._do_shortcode_tag, content)

    def strip_shortcodes(self, content: str) -> str:
        """Remove every registered shortcode, body included, from ``content``."""
        if not self._tags:
            return content
        return self.shortcode_regex().sub(self._strip_shortcode_tag, content)

    def shortcode_parse_attrs(self, text: str) -> Union[Attributes, str]:
        return parse_attrs(text)

    def shortcode_attrs(
        self,
        pairs: Mapping[str, Any],
        attrs: Union[Mapping[Any, Any], str, None],
        shortcode: str = "",
    ) -> Dict[str, Any]:
        """
        Combine user attributes with known attributes and fill in defaults.

        Only names present in ``pairs`` survive. When ``shortcode`` is given
        the result is passed through the ``shortcodeAttrs_<shortcode>`` filter
        together with ``pairs`` and ``attrs``.
        """
        supplied = attrs if isinstance(attrs, Mapping) else {}
        out = {name: supplied[name] if name in supplied else default for name, default in pairs.items()}

        if shortcode:
            out = self.filters.apply_filters(f"{ATTRS_FILTER_PREFIX}{shortcode}", out, pairs, attrs)
        return out

    def _do_shortcode_tag(self, match: "re.Match[str]") -> str:
        found = ShortcodeMatch.from_match(match)
        if found.escaped:
            return found.unescaped

        handler = self._tags.get(found.name)
        if handler is None:
            # removed by a handler earlier in the same pass
            return found.raw

        result = handler(parse_attrs(found.attrs), found.content, found.name)
        return found.open + ("" if result is None or result is False else str(result)) + found.close

    @staticmethod
    def _strip_shortcode_tag(match: "re.Match[str]") -> str:
        found = ShortcodeMatch.from_match(match)
        if found.escaped:
            return found.unescaped
        return found.open + found.close
