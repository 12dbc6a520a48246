"""Hooks system - WordPress-style action hooks."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

from .config import PRIORITY_NEUTRAL
from .filters import Filters
from .registry import HandlerRef, PathRef

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, list, tuple, dict, set, frozenset)


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALAR_TYPES)


class Hooks(Filters):
    """
    WordPress-style action hooks.

    Actions share storage with filters: an action is a filter whose return
    value is thrown away. Every fire is counted, see :meth:`did_action`.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._fired: Dict[str, int] = {}

    def add_action(
        self,
        hook_name: str,
        callback: HandlerRef,
        priority: int = PRIORITY_NEUTRAL,
        include_path: Optional[PathRef] = None,
    ) -> bool:
        """
        Add an action hook.

        Args:
            hook_name: Name of the hook
            callback: Function to call
            priority: Lower = earlier execution (default: 50)
            include_path: Python file to run once before the first call
        """
        return self.add_filter(hook_name, callback, priority, include_path)

    def remove_action(self, hook_name: str, callback: HandlerRef, priority: int = PRIORITY_NEUTRAL) -> bool:
        """Remove a specific action."""
        return self.remove_filter(hook_name, callback, priority)

    def remove_all_actions(self, hook_name: str, priority: Optional[int] = None) -> bool:
        return self.remove_all_filters(hook_name, priority)

    def has_action(self, hook_name: str, callback: Any = False) -> Union[bool, int]:
        """Check if a hook has any actions, or return the priority of ``callback``."""
        return self.has_filter(hook_name, callback)

    def do_action(self, hook_name: str, arg: Any = "", *args: Any, **kwargs: Any) -> bool:
        """
        Execute all callbacks for a hook.

        A list holding exactly one object is unwrapped, so callbacks receive
        (and may mutate) that object directly.

        Args:
            hook_name: Name of the hook to execute
            arg: First argument passed to callbacks
            *args: Further positional arguments to pass to callbacks
            **kwargs: Keyword arguments to pass to callbacks

        Returns:
            False when nothing is registered for ``hook_name``
        """
        self._count(hook_name)
        with self._firing(hook_name):
            self._call_all_hook(hook_name, arg, *args, **kwargs)
            if hook_name not in self.registry:
                return False

            if isinstance(arg, list) and len(arg) == 1 and _is_object(arg[0]):
                arg = arg[0]
            for entry in self.registry.entries(hook_name):
                self._call(entry, arg, *args, **kwargs)
            return True

    def do_action_ref_array(self, hook_name: str, args: Sequence[Any]) -> bool:
        """Execute all callbacks for a hook, with every argument supplied in one list."""
        self._count(hook_name)
        args = list(args)
        with self._firing(hook_name):
            self._call_all_hook(hook_name, args)
            if hook_name not in self.registry:
                return False

            for entry in self.registry.entries(hook_name):
                self._call(entry, *args)
            return True

    def did_action(self, hook_name: str) -> int:
        """Number of times ``hook_name`` has been fired."""
        return self._fired.get(hook_name, 0)

    def _count(self, hook_name: str) -> None:
        self._fired[hook_name] = self._fired.get(hook_name, 0) + 1
