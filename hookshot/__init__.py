"""
hookshot - Priority-ordered hooks, filters and shortcodes for Python
"""

from .config import PRIORITY_NEUTRAL, WILDCARD_TAG
from .core import (
    Context,
    add_action,
    add_filter,
    add_shortcode,
    apply_filters,
    apply_filters_ref_array,
    current_filter,
    did_action,
    do_action,
    do_action_ref_array,
    do_shortcode,
    get_instance,
    has_action,
    has_filter,
    has_shortcode,
    on_action,
    on_filter,
    remove_action,
    remove_all_actions,
    remove_all_filters,
    remove_all_shortcodes,
    remove_filter,
    remove_shortcode,
    shortcode,
    shortcode_attrs,
    shortcode_exists,
    shortcode_parse_attrs,
    strip_shortcodes,
)
from .filters import Filters
from .hooks import Hooks
from .parser import ShortcodeMatch, build_pattern, parse_attrs
from .registry import HandlerResolutionError, HookRegistry, handler_id
from .shortcodes import Shortcodes

__version__ = "0.1.0"
__all__ = [
    "PRIORITY_NEUTRAL",
    "WILDCARD_TAG",
    "Context",
    "Filters",
    "Hooks",
    "HookRegistry",
    "HandlerResolutionError",
    "Shortcodes",
    "ShortcodeMatch",
    "build_pattern",
    "parse_attrs",
    "handler_id",
    "get_instance",
    "add_filter",
    "remove_filter",
    "remove_all_filters",
    "has_filter",
    "apply_filters",
    "apply_filters_ref_array",
    "current_filter",
    "add_action",
    "remove_action",
    "remove_all_actions",
    "has_action",
    "do_action",
    "do_action_ref_array",
    "did_action",
    "add_shortcode",
    "remove_shortcode",
    "remove_all_shortcodes",
    "shortcode_exists",
    "has_shortcode",
    "do_shortcode",
    "strip_shortcodes",
    "shortcode_parse_attrs",
    "shortcode_attrs",
    "on_filter",
    "on_action",
    "shortcode",
]
