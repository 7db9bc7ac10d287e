"""Unit tests for the kind registry."""

from __future__ import annotations

import threading

from dualdispatch.kinds import Kind, KindRegistry, Operand, as_kind, kind_for, kind_of


class Widget(Operand):
    pass


class Gadget(Operand):
    pass


class TestKindRegistry:
    """Tests for KindRegistry."""

    def test_same_class_same_kind(self) -> None:
        registry = KindRegistry()
        assert registry.kind_for(int) is registry.kind_for(int)
        assert registry.kind_of(1) == registry.kind_of(2)

    def test_distinct_classes_distinct_kinds(self) -> None:
        registry = KindRegistry()
        assert registry.kind_for(int) != registry.kind_for(str)

    def test_same_name_distinct_kinds(self) -> None:
        """Two classes sharing a name still get different kinds."""

        def make() -> type:
            class Thing:
                pass

            return Thing

        registry = KindRegistry()
        first = registry.kind_for(make())
        second = registry.kind_for(make())
        assert first.name == second.name
        assert first != second

    def test_registers_on_first_use(self) -> None:
        registry = KindRegistry()
        assert float not in registry
        registry.kind_of(1.5)
        assert float in registry
        assert len(registry) == 1

    def test_known_in_assignment_order(self) -> None:
        registry = KindRegistry()
        a = registry.kind_for(bytes)
        b = registry.kind_for(list)
        assert registry.known() == (a, b)

    def test_concurrent_assignment(self) -> None:
        registry = KindRegistry()
        results: list[Kind] = []
        lock = threading.Lock()

        def worker() -> None:
            kind = registry.kind_for(dict)
            with lock:
                results.append(kind)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(results)) == 1
        assert len(registry) == 1


    def test_known_during_assignment(self) -> None:
        registry = KindRegistry()
        classes = [type(f"K{i}", (), {}) for i in range(200)]
        errors: list[Exception] = []

        def assign() -> None:
            for cls in classes:
                registry.kind_for(cls)

        def snapshot() -> None:
            try:
                for _ in range(200):
                    registry.known()
            except RuntimeError as e:
                errors.append(e)

        threads = [threading.Thread(target=assign), threading.Thread(target=snapshot)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(registry.known()) == len(classes)


class TestOperand:
    """Tests for Operand subclasses."""

    def test_kind_set_at_class_creation(self) -> None:
        assert Widget.kind == kind_for(Widget)
        assert Widget().kind == kind_of(Widget())

    def test_subclasses_differ(self) -> None:
        assert Widget.kind != Gadget.kind

    def test_as_kind(self) -> None:
        assert as_kind(Widget) == Widget.kind
        assert as_kind(Widget.kind) is Widget.kind

    def test_str_is_name(self) -> None:
        assert str(Widget.kind) == "Widget"
