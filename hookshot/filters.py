"""Filters system - WordPress-style filter hooks."""

from __future__ import annotations

import logging
import os
import runpy
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Sequence, Set, Union

from .config import PRIORITY_NEUTRAL, WILDCARD_TAG
from .registry import HandlerRef, HookEntry, HookRegistry, PathRef, resolve_handler

logger = logging.getLogger(__name__)


class Filters:
    """
    Fire filter hooks stored in a :class:`HookRegistry`.

    Handlers registered on the ``all`` tag are called before the handlers of
    any fired tag. A handler may fire other tags (or the same one) while it
    runs; :meth:`current_filter` always names the innermost one.
    """

    def __init__(self, registry: Optional[HookRegistry] = None) -> None:
        self.registry = registry if registry is not None else HookRegistry()
        self._current: List[str] = []
        self._included: Set[str] = set()

    def add_filter(
        self,
        tag: str,
        callback: HandlerRef,
        priority: int = PRIORITY_NEUTRAL,
        include_path: Optional[PathRef] = None,
    ) -> bool:
        """
        Add a filter.

        Args:
            tag: Filter name
            callback: Callback to execute (should accept and return value)
            priority: Lower = earlier execution (default: 50)
            include_path: Python file to run once before the first call
        """
        return self.registry.add(tag, callback, priority, include_path)

    def remove_filter(self, tag: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
        """Remove a specific filter."""
        return self.registry.remove(tag, callback, priority)

    def remove_all_filters(self, tag: str, priority: Optional[int] = None) -> bool:
        return self.registry.remove_all(tag, priority)

    def has_filter(self, tag: str, callback: Any = False) -> Union[bool, int]:
        """Check if a filter exists, or return the priority of ``callback``."""
        return self.registry.has(tag, callback)

    def apply_filters(self, tag: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Apply all filters to a value.

        Args:
            tag: Filter name
            value: Initial value
            *args: Additional positional arguments
            **kwargs: Additional keyword arguments

        Returns:
            Filtered value, or ``value`` itself when nothing is registered
        """
        with self._firing(tag):
            self._call_all_hook(tag, value, *args, **kwargs)
            if tag not in self.registry:
                return value

            for entry in self.registry.entries(tag):
                value = self._call(entry, value, *args, **kwargs)
            return value

    def apply_filters_ref_array(self, tag: str, args: Sequence[Any]) -> Any:
        """
        Apply filters with every argument supplied in one list.

        ``args[0]`` is the filtered value: each callback receives ``*args``
        and its result replaces ``args[0]`` for the next one.
        """
        args = list(args) or [None]
        with self._firing(tag):
            self._call_all_hook(tag, args)
            if tag not in self.registry:
                return args[0]

            for entry in self.registry.entries(tag):
                args[0] = self._call(entry, *args)
            return args[0]

    def current_filter(self) -> str:
        """Name of the innermost tag being fired, or ``""``."""
        return self._current[-1] if self._current else ""

    current_tag = current_filter

    @contextmanager
    def _firing(self, tag: str) -> Iterator[None]:
        self._current.append(tag)
        try:
            yield
        finally:
            self._current.pop()

    def _call_all_hook(self, *args: Any, **kwargs: Any) -> None:
        if WILDCARD_TAG not in self.registry:
            return
        for entry in self.registry.entries(WILDCARD_TAG):
            self._call(entry, *args, **kwargs)

    def _call(self, entry: HookEntry, *args: Any, **kwargs: Any) -> Any:
        if entry.include_path is not None:
            self._include_once(entry.include_path)
        callback: Callable[..., Any] = resolve_handler(entry.handler)
        return callback(*args, **kwargs)

    def _include_once(self, path: str) -> None:
        key = os.path.abspath(path)
        if key in self._included:
            return
        logger.debug("Running include %s", key)
        runpy.run_path(key)
        self._included.add(key)
