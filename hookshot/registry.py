"""Priority-ordered storage for hook handlers.

A tag maps to ``{priority: {identity: HookEntry}}``. Priorities are sorted
lazily before a fire; within one priority, entries keep registration order.

The registry is plain shared state with no locking. Use it from a single
thread, or serialize access around it.
"""

from __future__ import annotations

import inspect
import logging
import os
import pkgutil
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Set, Union

from .config import PRIORITY_NEUTRAL

logger = logging.getLogger(__name__)


class HandlerResolutionError(LookupError):
    """Raised when a string handler reference cannot be resolved."""


@dataclass(frozen=True)
class NamedId:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BoundId:
    instance_token: int
    method: str

    def __str__(self) -> str:
        return f"{self.instance_token:x}{self.method}"


@dataclass(frozen=True)
class StaticId:
    type_name: str
    method: str

    def __str__(self) -> str:
        return f"{self.type_name}{self.method}"


@dataclass(frozen=True)
class ClosureId:
    token: int

    def __str__(self) -> str:
        return f"{self.token:x}"


HandlerId = Union[NamedId, BoundId, StaticId, ClosureId]

# A callable, a dotted name, or an ``(owner, "method")`` pair.
HandlerRef = Union[Callable[..., Any], str, tuple]

PathRef = Union[str, "os.PathLike[str]"]


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def handler_id(handler: HandlerRef) -> HandlerId:
    """Derive the identity under which ``handler`` is stored.

    Two references to the same target produce equal identities, so
    ``obj.method`` passed twice (two distinct bound-method objects) is still
    one registration.
    """
    if isinstance(handler, str):
        return NamedId(handler)

    if isinstance(handler, tuple):
        if len(handler) != 2 or not isinstance(handler[1], str):
            raise TypeError(f"handler pair must be (owner, 'method'), got {handler!r}")
        owner, method = handler
        if inspect.isclass(owner):
            return StaticId(_type_name(owner), method)
        return BoundId(id(owner), method)

    # Python and builtin bound methods alike; module-level builtins such as
    # ``len`` carry their module as ``__self__``.
    owner = getattr(handler, "__self__", None)
    if callable(handler) and owner is not None and not inspect.ismodule(owner):
        if inspect.isclass(owner):
            return StaticId(_type_name(owner), handler.__name__)
        return BoundId(id(owner), handler.__name__)

    if callable(handler):
        return ClosureId(id(handler))

    raise TypeError(f"hook handler must be callable, got {type(handler).__name__}")


def resolve_handler(handler: HandlerRef) -> Callable[..., Any]:
    """Turn a stored handler reference into something that can be called."""
    if isinstance(handler, str):
        try:
            return pkgutil.resolve_name(handler)
        except (ImportError, AttributeError, ValueError) as exc:
            raise HandlerResolutionError(f"Cannot resolve hook handler '{handler}'") from exc
    if isinstance(handler, tuple):
        owner, method = handler
        try:
            return getattr(owner, method)
        except AttributeError as exc:
            raise HandlerResolutionError(f"{owner!r} has no method '{method}'") from exc
    return handler


@dataclass(frozen=True)
class HookEntry:
    handler: HandlerRef
    include_path: Optional[str] = None


class HookRegistry:
    """Tag -> priority -> handlers, shared by filters and actions."""

    def __init__(self) -> None:
        self._tags: Dict[str, Dict[int, Dict[HandlerId, HookEntry]]] = {}
        self._merged: Set[str] = set()

    def add(
        self,
        tag: str,
        handler: HandlerRef,
        priority: int = PRIORITY_NEUTRAL,
        include_path: Optional[PathRef] = None,
    ) -> bool:
        """
        Register ``handler`` on ``tag``.

        Args:
            tag: Hook name
            handler: Callable, dotted name, or ``(owner, "method")`` pair
            priority: Lower = earlier execution (default: 50)
            include_path: Python file to run once before the first call

        Returns:
            Always True. Re-adding the same handler at the same priority
            replaces the entry in place.
        """
        idx = handler_id(handler)
        bucket = self._tags.setdefault(tag, {}).setdefault(priority, {})
        bucket[idx] = HookEntry(
            handler=handler,
            include_path=os.fspath(include_path) if isinstance(include_path, (str, os.PathLike)) else None,
        )
        self._merged.discard(tag)
        logger.debug("Added hook %s on '%s' at priority %s", idx, tag, priority)
        return True

    def remove(self, tag: str, handler: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
        """Remove one handler at one priority. The tag key itself is kept."""
        idx = handler_id(handler)
        buckets = self._tags.get(tag)
        if buckets is None or idx not in buckets.get(priority, {}):
            return False

        del buckets[priority][idx]
        if not buckets[priority]:
            del buckets[priority]

        self._merged.discard(tag)
        logger.debug("Removed hook %s from '%s' at priority %s", idx, tag, priority)
        return True

    def remove_all(self, tag: str, priority: Optional[int] = None) -> bool:
        """
        Drop one priority bucket of ``tag``, or the whole tag.

        A priority that is not registered on the tag drops the whole tag.
        """
        self._merged.discard(tag)
        buckets = self._tags.get(tag)
        if buckets is None:
            return True

        if priority is not None and priority in buckets:
            del buckets[priority]
        else:
            del self._tags[tag]
        return True

    def has(self, tag: str, handler: Any = False) -> Union[bool, int]:
        """
        Check whether ``tag`` is registered, or at which priority ``handler`` is.

        Without ``handler`` this is a presence check on the tag key, so a tag
        emptied through :meth:`remove` still reports True. With ``handler``
        the priority is returned, which may be ``0``; compare with
        ``is not False``.
        """
        buckets = self._tags.get(tag)
        if handler is False or buckets is None:
            return buckets is not None

        try:
            idx = handler_id(handler)
        except TypeError:
            return False

        for priority, bucket in buckets.items():
            if idx in bucket:
                return priority
        return False

    def prepare_and_sort(self, tag: str) -> None:
        if tag in self._merged or tag not in self._tags:
            return
        self._tags[tag] = dict(sorted(self._tags[tag].items(), key=lambda item: item[0]))
        self._merged.add(tag)

    def entries(self, tag: str) -> List[HookEntry]:
        """Snapshot of ``tag``'s entries in execution order."""
        self.prepare_and_sort(tag)
        return [entry for bucket in self._tags.get(tag, {}).values() for entry in bucket.values()]

    def is_sorted(self, tag: str) -> bool:
        return tag in self._merged

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags
