"""Tests for hook storage, identity and ordering."""

import functools

import pytest

from hookshot.registry import (
    BoundId,
    ClosureId,
    HandlerResolutionError,
    HookRegistry,
    NamedId,
    StaticId,
    handler_id,
    resolve_handler,
)


class Widget:
    def render(self, value):
        return value

    @classmethod
    def build(cls, value):
        return value

    @staticmethod
    def helper(value):
        return value


def noop(value):
    return value


class TestHandlerIdentity:
    """Identity derivation for the four handler shapes."""

    def test_string_is_its_own_identity(self):
        assert handler_id("os.path:basename") == NamedId("os.path:basename")

    def test_bound_methods_of_one_instance_collide(self):
        widget = Widget()
        assert handler_id(widget.render) == handler_id(widget.render)
        assert handler_id(widget.render) == BoundId(id(widget), "render")

    def test_bound_methods_of_different_instances_differ(self):
        assert handler_id(Widget().render) != handler_id(Widget().render)

    def test_pair_matches_bound_method(self):
        widget = Widget()
        assert handler_id((widget, "render")) == handler_id(widget.render)

    def test_classmethod_uses_type_name(self):
        expected = StaticId(f"{__name__}.Widget", "build")
        assert handler_id(Widget.build) == expected
        assert handler_id((Widget, "build")) == expected

    def test_plain_callables_use_object_token(self):
        assert handler_id(noop) == ClosureId(id(noop))
        assert handler_id(Widget.helper) == handler_id(Widget.helper)
        first, second = (lambda v: v), (lambda v: v)
        assert handler_id(first) != handler_id(second)

    def test_builtin_bound_methods_of_one_owner_collide(self):
        calls = []
        assert handler_id(calls.append) == handler_id(calls.append)
        assert handler_id(calls.append) == BoundId(id(calls), "append")
        assert handler_id(dict.fromkeys) == StaticId("builtins.dict", "fromkeys")

    def test_module_builtins_are_closures(self):
        assert handler_id(len) == ClosureId(id(len))

    def test_builtin_bound_method_can_be_queried_and_removed(self):
        registry = HookRegistry()
        calls = []
        registry.add("evt", calls.append, 10)
        assert registry.has("evt", calls.append) == 10
        assert registry.remove("evt", calls.append, 10) is True
        assert registry.has("evt", calls.append) is False
        assert registry.entries("evt") == []

    def test_partial_is_a_closure(self):
        part = functools.partial(noop)
        assert isinstance(handler_id(part), ClosureId)

    def test_rejects_uncallable(self):
        with pytest.raises(TypeError):
            handler_id(42)
        with pytest.raises(TypeError):
            handler_id((Widget, "render", "extra"))

    def test_resolve_named_handler(self):
        import os.path

        assert resolve_handler("os.path:basename") is os.path.basename
        assert resolve_handler("os.path.basename") is os.path.basename

    def test_resolve_pair(self):
        widget = Widget()
        assert resolve_handler((widget, "render"))("x") == "x"

    def test_resolve_unknown_name(self):
        with pytest.raises(HandlerResolutionError):
            resolve_handler("os.path:no_such_function")
        with pytest.raises(HandlerResolutionError):
            resolve_handler((Widget(), "missing"))


class TestRegistry:
    """Add, remove and query."""

    def test_empty_tag(self):
        registry = HookRegistry()
        assert registry.has("nothing") is False
        assert registry.has("nothing", noop) is False
        assert registry.entries("nothing") == []

    def test_add_returns_true_and_reports_priority(self):
        registry = HookRegistry()
        assert registry.add("tag", noop, 10) is True
        assert registry.has("tag") is True
        assert registry.has("tag", noop) == 10

    def test_priority_zero_is_not_false(self):
        registry = HookRegistry()
        registry.add("tag", noop, 0)
        assert registry.has("tag", noop) == 0
        assert registry.has("tag", noop) is not False

    def test_default_priority(self):
        registry = HookRegistry()
        registry.add("tag", noop)
        assert registry.has("tag", noop) == 50

    def test_has_with_uncallable_is_false(self):
        registry = HookRegistry()
        registry.add("tag", noop)
        assert registry.has("tag", 42) is False

    def test_same_identity_overwrites_in_place(self):
        registry = HookRegistry()
        first, second = (lambda v: v), (lambda v: v)
        registry.add("tag", first)
        registry.add("tag", second)
        registry.add("tag", first, include_path="extra.py")
        entries = registry.entries("tag")
        assert [entry.handler for entry in entries] == [first, second]
        assert entries[0].include_path == "extra.py"

    def test_identity_is_scoped_to_priority(self):
        registry = HookRegistry()
        registry.add("tag", noop, 10)
        registry.add("tag", noop, 25)
        assert len(registry.entries("tag")) == 2

    def test_remove(self):
        registry = HookRegistry()
        registry.add("tag", noop, 10)
        assert registry.remove("tag", noop) is False
        assert registry.remove("tag", noop, 10) is True
        assert registry.has("tag", noop) is False
        assert registry.remove("tag", noop, 10) is False

    def test_remove_keeps_tag_key(self):
        registry = HookRegistry()
        registry.add("tag", noop)
        registry.remove("tag", noop)
        assert registry.has("tag") is True
        assert registry.entries("tag") == []

    def test_remove_by_fresh_bound_method(self):
        registry = HookRegistry()
        widget = Widget()
        registry.add("tag", widget.render)
        assert registry.remove("tag", widget.render) is True

    def test_remove_all_priority(self):
        registry = HookRegistry()
        registry.add("tag", noop, 10)
        registry.add("tag", "os.path:basename", 10)
        registry.add("tag", noop, 25)

        assert registry.remove_all("tag", 10) is True
        assert registry.has("tag") is True
        assert registry.has("tag", noop) == 25

        assert registry.remove_all("tag") is True
        assert registry.has("tag") is False

    def test_remove_all_unknown_priority_drops_tag(self):
        registry = HookRegistry()
        registry.add("tag", noop, 10)
        assert registry.remove_all("tag", 99) is True
        assert registry.has("tag") is False

    def test_remove_all_absent_tag(self):
        assert HookRegistry().remove_all("missing") is True


class TestOrdering:
    """Priority ascending, then registration order."""

    def test_priority_then_insertion(self):
        registry = HookRegistry()
        a, b, c, d = (lambda v: v), (lambda v: v), (lambda v: v), (lambda v: v)
        registry.add("tag", a, 25)
        registry.add("tag", b, 10)
        registry.add("tag", c, 25)
        registry.add("tag", d, -5)
        assert [entry.handler for entry in registry.entries("tag")] == [d, b, a, c]

    def test_sort_flag(self):
        registry = HookRegistry()
        registry.add("tag", noop, 30)
        assert registry.is_sorted("tag") is False
        registry.prepare_and_sort("tag")
        assert registry.is_sorted("tag") is True

        registry.add("tag", "os.path:basename", 5)
        assert registry.is_sorted("tag") is False
        assert [entry.handler for entry in registry.entries("tag")] == ["os.path:basename", noop]
        assert registry.is_sorted("tag") is True

    def test_has_scans_unsorted_keys(self):
        registry = HookRegistry()
        registry.add("tag", noop, 30)
        registry.add("tag", noop, 5)
        assert registry.has("tag", noop) == 30
        registry.prepare_and_sort("tag")
        assert registry.has("tag", noop) == 5
