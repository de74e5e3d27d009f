"""
Tests for the structural reflection adapter.
"""

from __future__ import annotations

import dataclasses
from collections import OrderedDict, deque, namedtuple
from typing import Any

import pytest

from mstair.stringify.stringifier import reflection
from mstair.stringify.stringifier.reflection import (
    enumerable_item_type,
    is_enumerable,
    readable_fields,
)


Coord = namedtuple("Coord", ["lat", "lon"])


@dataclasses.dataclass
class Base:
    ident: int
    _hidden: int = 0
    note: str = dataclasses.field(default="", repr=False)


@dataclasses.dataclass
class Derived(Base):
    label: str = "x"


class WithProperties:
    def __init__(self) -> None:
        self.plain = 1

    @property
    def computed(self) -> int:
        return self.plain + 1

    def method(self) -> int:
        return 0


class Bag[T](list[T]):
    pass


def _values(value: Any) -> dict[str, Any]:
    return {f.name: f.read() for f in readable_fields(value)}


@pytest.mark.unit
@pytest.mark.parametrize(
    ("tp", "expected"),
    [
        (list, True),
        (tuple, True),
        (set, True),
        (frozenset, True),
        (range, True),
        (deque, True),
        (str, False),
        (bytes, False),
        (dict, False),
        (OrderedDict, False),
        (Coord, False),
        (type(iter([])), False),
        (int, False),
    ],
)
def test_is_enumerable(tp: type, expected: bool) -> None:
    assert is_enumerable(tp) is expected


@pytest.mark.unit
def test_is_enumerable_rejects_non_types() -> None:
    assert is_enumerable([1, 2]) is False  # type: ignore[arg-type]


@pytest.mark.unit
def test_enumerable_item_type_from_items() -> None:
    assert enumerable_item_type([1, 2]) is int
    assert enumerable_item_type([True, 1]) is int
    assert enumerable_item_type([1, "a"]) is object
    assert enumerable_item_type([Derived(1), Base(2)]) is Base
    assert enumerable_item_type([]) is None
    assert enumerable_item_type([None, None]) is None


@pytest.mark.unit
def test_enumerable_item_type_prefers_generic_argument() -> None:
    bag = Bag[int]()
    assert enumerable_item_type(bag) is int


@pytest.mark.unit
def test_enumerable_item_type_uses_materialized_items() -> None:
    gen = iter([1.0, 2.0])
    items = list(gen)
    assert enumerable_item_type(gen, items) is float


@pytest.mark.unit
def test_dataclass_fields_respect_repr_and_privacy() -> None:
    assert _values(Derived(7)) == {"ident": 7, "label": "x"}
    assert [f.name for f in readable_fields(Derived(7))] == ["ident", "label"]


@pytest.mark.unit
def test_mapping_fields_have_no_origin() -> None:
    fields = readable_fields({"a": 1, 2: "b"})
    assert [(f.name, f.read(), f.origin) for f in fields] == [("a", 1, ""), ("2", "b", "")]


@pytest.mark.unit
def test_named_tuple_fields() -> None:
    assert _values(Coord(1.5, 2.5)) == {"lat": 1.5, "lon": 2.5}


@pytest.mark.unit
def test_plain_object_fields_include_properties_not_methods() -> None:
    fields = readable_fields(WithProperties())
    assert [f.name for f in fields] == ["plain", "computed"]
    assert [f.read() for f in fields] == [1, 2]
    assert {f.origin for f in fields} == {WithProperties.__module__}


@pytest.mark.unit
def test_builtin_descriptors_report_builtins_origin() -> None:
    fields = readable_fields(KeyError("k"))
    assert [(f.name, f.origin) for f in fields] == [("args", "builtins")]


@pytest.mark.unit
def test_field_reads_are_live_and_may_raise() -> None:
    class Flaky:
        @property
        def value(self) -> int:
            raise LookupError("gone")

    (field,) = readable_fields(Flaky())
    with pytest.raises(LookupError):
        field.read()


@pytest.mark.unit
def test_stringify_fields_hook_wins_over_structure() -> None:
    @dataclasses.dataclass
    class Hooked:
        a: int = 1

        def __stringify_fields__(self) -> list[tuple[str, Any]]:
            return [("only", "this")]

    assert _values(Hooked()) == {"only": "this"}
    assert reflection.STRINGIFY_FIELDS_HOOK == "__stringify_fields__"
