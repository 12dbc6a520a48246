"""Context facade and the process-wide convenience API for hookshot."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Pattern, Sequence, Union

from .config import PRIORITY_NEUTRAL
from .hooks import Hooks
from .parser import Attributes
from .registry import HandlerRef, HookRegistry, PathRef
from .shortcodes import ShortcodeHandler, Shortcodes


class Context:
    """
    One isolated set of hooks, filters and shortcodes.

    Create a fresh Context wherever isolation matters (tests, embedded
    plugins). The module-level functions in this module act on one shared
    instance, see :func:`get_instance`.

    Nothing here is thread-safe; guard a Context with your own lock if it is
    used from several threads.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every hook, fire count and shortcode."""
        self.registry = HookRegistry()
        self.hooks = Hooks(self.registry)
        self.shortcodes = Shortcodes(self.hooks)

    # Filters

    def add_filter(
        self,
        tag: str,
        callback: HandlerRef,
        priority: int = PRIORITY_NEUTRAL,
        include_path: Optional[PathRef] = None,
    ) -> bool:
        return self.hooks.add_filter(tag, callback, priority, include_path)

    def remove_filter(self, tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
        return self.hooks.remove_filter(tag, callback, priority)

    def remove_all_filters(self, tag: str, priority: Optional[int] = None) -> bool:
        return self.hooks.remove_all_filters(tag, priority)

    def has_filter(self, tag: str, callback: Any = False) -> Union[bool, int]:
        return self.hooks.has_filter(tag, callback)

    def apply_filters(self, tag: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        return self.hooks.apply_filters(tag, value, *args, **kwargs)

    def apply_filters_ref_array(self, tag: str, args: Sequence[Any]) -> Any:
        return self.hooks.apply_filters_ref_array(tag, args)

    def current_filter(self) -> str:
        return self.hooks.current_filter()

    # Actions

    def add_action(
        self,
        tag: str,
        callback: HandlerRef,
        priority: int = PRIORITY_NEUTRAL,
        include_path: Optional[PathRef] = None,
    ) -> bool:
        return self.hooks.add_action(tag, callback, priority, include_path)

    def remove_action(self, tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
        return self.hooks.remove_action(tag, callback, priority)

    def remove_all_actions(self, tag: str, priority: Optional[int] = None) -> bool:
        return self.hooks.remove_all_actions(tag, priority)

    def has_action(self, tag: str, callback: Any = False) -> Union[bool, int]:
        return self.hooks.has_action(tag, callback)

    def do_action(self, tag: str, arg: Any = "", *args: Any, **kwargs: Any) -> bool:
        return self.hooks.do_action(tag, arg, *args, **kwargs)

    def do_action_ref_array(self, tag: str, args: Sequence[Any]) -> bool:
        return self.hooks.do_action_ref_array(tag, args)

    def did_action(self, tag: str) -> int:
        return self.hooks.did_action(tag)

    # Shortcodes

    def add_shortcode(self, tag: str, handler: ShortcodeHandler) -> bool:
        return self.shortcodes.add_shortcode(tag, handler)

    def remove_shortcode(self, tag: str) -> bool:
        return self.shortcodes.remove_shortcode(tag)

    def remove_all_shortcodes(self) -> bool:
        return self.shortcodes.remove_all_shortcodes()

    def shortcode_exists(self, tag: str) -> bool:
        return self.shortcodes.shortcode_exists(tag)

    def has_shortcode(self, content: str, tag: str) -> bool:
        return self.shortcodes.has_shortcode(content, tag)

    def shortcode_regex(self) -> Pattern[str]:
        return self.shortcodes.shortcode_regex()

    def do_shortcode(self, content: str) -> str:
        return self.shortcodes.do_shortcode(content)

    def strip_shortcodes(self, content: str) -> str:
        return self.shortcodes.strip_shortcodes(content)

    def shortcode_parse_attrs(self, text: str) -> Union[Attributes, str]:
        return self.shortcodes.shortcode_parse_attrs(text)

    def shortcode_attrs(
        self,
        pairs: Mapping[str, Any],
        attrs: Union[Mapping[Any, Any], str, None],
        shortcode: str = "",
    ) -> Dict[str, Any]:
        return self.shortcodes.shortcode_attrs(pairs, attrs, shortcode)

    # Decorators

    def filter(self, tag: str, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None):
        def decorator(func: Callable):
            self.add_filter(tag, func, priority, include_path)
            return func

        return decorator

    def action(self, tag: str, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None):
        def decorator(func: Callable):
            self.add_action(tag, func, priority, include_path)
            return func

        return decorator

    def shortcode(self, tag: str):
        def decorator(func: ShortcodeHandler):
            if not self.add_shortcode(tag, func):
                raise TypeError(f"Shortcode handler for '{tag}' must be callable")
            return func

        return decorator


_global_context = Context()


def get_instance() -> Context:
    return _global_context


def add_filter(tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None) -> bool:
    return _global_context.add_filter(tag, callback, priority, include_path)


def remove_filter(tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
    return _global_context.remove_filter(tag, callback, priority)


def remove_all_filters(tag: str, priority: Optional[int] = None) -> bool:
    return _global_context.remove_all_filters(tag, priority)


def has_filter(tag: str, callback: Any = False) -> Union[bool, int]:
    return _global_context.has_filter(tag, callback)


def apply_filters(tag: str, value: Any, *args: Any, **kwargs: Any) -> Any:
    return _global_context.apply_filters(tag, value, *args, **kwargs)


def apply_filters_ref_array(tag: str, args: Sequence[Any]) -> Any:
    return _global_context.apply_filters_ref_array(tag, args)


def current_filter() -> str:
    return _global_context.current_filter()


def add_action(tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None) -> bool:
    return _global_context.add_action(tag, callback, priority, include_path)


def remove_action(tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
    return _global_context.remove_action(tag, callback, priority)


def remove_all_actions(tag: str, priority: Optional[int] = None) -> bool:
    return _global_context.remove_all_actions(tag, priority)


def has_action(tag: str, callback: Any = False) -> Union[bool, int]:
    return _global_context.has_action(tag, callback)


def do_action(tag: str, arg: Any = "", *args: Any, **kwargs: Any) -> bool:
    return _global_context.do_action(tag, arg, *args, **kwargs)


def do_action_ref_array(tag: str, args: Sequence[Any]) -> bool:
    return _global_context.do_action_ref_array(tag, args)


def did_action(tag: str) -> int:
    return _global_context.did_action(tag)


def add_shortcode(tag: str, handler: ShortcodeHandler) -> bool:
    return _global_context.add_shortcode(tag, handler)


def remove_shortcode(tag: str) -> bool:
    return _global_context.remove_shortcode(tag)


def remove_all_shortcodes() -> bool:
    return _global_context.remove_all_shortcodes()


def shortcode_exists(tag: str) -> bool:
    return _global_context.shortcode_exists(tag)


def has_shortcode(content: str, tag: str) -> bool:
    return _global_context.has_shortcode(content, tag)


def do_shortcode(content: str) -> str:
    return _global_context.do_shortcode(content)


def strip_shortcodes(content: str) -> str:
    return _global_context.strip_shortcodes(content)


def shortcode_parse_attrs(text: str) -> Union[Attributes, str]:
    return _global_context.shortcode_parse_attrs(text)


def shortcode_attrs(pairs: Mapping[str, Any], attrs: Union[Mapping[Any, Any], str, None], shortcode: str = "") -> Dict[str, Any]:
    return _global_context.shortcode_attrs(pairs, attrs, shortcode)


def on_filter(tag: str, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None):
    return _global_context.filter(tag, priority, include_path)


def on_action(tag: str, priority: int = PRIORITY_NEUTRAL, include_path: Optional[PathRef] = None):
    return _global_context.action(tag, priority, include_path)


def shortcode(tag: str):
    return _global_context.shortcode(tag)
