# File: src/mstair/stringify/stringifier/reflection.py
"""
Structural reflection over arbitrary values.

The stringifier never asks a value to describe itself beyond the optional
`__stringify_fields__()` protocol. Everything else is learned from the value's
type: whether it enumerates, what its items have in common, and which fields
can be read from it.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import typing
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from mstair.stringify.base.types import TEXTUAL_TYPES
from mstair.stringify.stringifier.model import Field


__all__ = [
    "enumerable_item_type",
    "is_enumerable",
    "is_named_tuple",
    "readable_fields",
]

STRINGIFY_FIELDS_HOOK = "__stringify_fields__"


def is_named_tuple(tp: type) -> bool:
    """Return True for classes built by collections.namedtuple or typing.NamedTuple."""
    return isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields")


def is_enumerable(tp: type) -> bool:
    """
    Return True if instances of `tp` render as collections.

    Text types, mappings, named tuples and one-shot iterators are iterable
    but are not collections here: text is atomic, mappings and named tuples
    are composites, and iterators must not be consumed.
    """
    if not isinstance(tp, type) or not issubclass(tp, Iterable):
        return False
    if issubclass(tp, TEXTUAL_TYPES) or issubclass(tp, (Mapping, Iterator)):
        return False
    return not is_named_tuple(tp)


def enumerable_item_type(value: Any, items: Iterable[Any] | None = None) -> type | None:
    """
    Return the item type of a collection, or None when it cannot be determined.

    A parameterized generic instance (one carrying `__orig_class__`) reports its
    single type argument. Otherwise the most specific class shared by all
    non-None items is returned, so an empty collection yields None.

    :param value: The collection.
    :param items: Already materialized items of `value`; read from `value` when omitted.
    """
    orig_class = getattr(value, "__orig_class__", None)
    if orig_class is not None:
        args = typing.get_args(orig_class)
        if len(args) == 1 and isinstance(args[0], type):
            return args[0]

    item_types = {type(item) for item in (value if items is None else items) if item is not None}
    if not item_types:
        return None
    first, *rest = item_types
    for candidate in first.__mro__:
        if all(issubclass(other, candidate) for other in rest):
            return candidate
    return object


def _constant(value: Any) -> Callable[[], Any]:
    return lambda: value


def _is_public(name: object) -> bool:
    return isinstance(name, str) and not name.startswith("_")


def _declaring_module(tp: type, name: str) -> str:
    """Module of the first class along the MRO that annotates or defines `name`."""
    for klass in tp.__mro__:
        if name in vars(klass) or name in inspect.get_annotations(klass):
            return klass.__module__
    return tp.__module__


def _hook_fields(value: Any) -> list[Field]:
    origin = type(value).__module__
    return [
        Field(str(name), _constant(item), origin)
        for name, item in getattr(value, STRINGIFY_FIELDS_HOOK)()
    ]


def _mapping_fields(value: Mapping[Any, Any]) -> list[Field]:
    return [Field(str(key), _constant(item)) for key, item in value.items()]


def _dataclass_fields(value: Any) -> list[Field]:
    tp = type(value)
    return [
        Field(f.name, functools.partial(getattr, value, f.name), _declaring_module(tp, f.name))
        for f in dataclasses.fields(value)
        if f.repr and _is_public(f.name)
    ]


def _named_tuple_fields(value: Any) -> list[Field]:
    origin = type(value).__module__
    return [Field(name, functools.partial(getattr, value, name), origin) for name in value._fields]


def _attribute_fields(value: Any) -> list[Field]:
    tp = type(value)
    origins: dict[str, str] = {}

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        for name in instance_dict:
            if _is_public(name):
                origins.setdefault(name, _declaring_module(tp, name))

    # Properties, slots and C-level getset descriptors, most-derived class first.
    for klass in tp.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if _is_public(name) and name not in origins and inspect.isdatadescriptor(attr):
                origins[name] = klass.__module__

    return [
        Field(name, functools.partial(getattr, value, name), origin)
        for name, origin in origins.items()
    ]


def readable_fields(value: Any) -> list[Field]:
    """
    Return the readable fields of a composite value, in display order.

    Sources, first applicable wins:
    - `__stringify_fields__()` returning (name, value) pairs;
    - mapping items, named by `str(key)`;
    - dataclass fields declared with repr=True;
    - named tuple fields;
    - public instance attributes, then public data descriptors (properties,
      slots) along the MRO.

    Reading a field may raise; callers guard each `Field.read()` individually.
    """
    tp = type(value)
    if callable(getattr(tp, STRINGIFY_FIELDS_HOOK, None)):
        return _hook_fields(value)
    if isinstance(value, Mapping):
        return _mapping_fields(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _dataclass_fields(value)
    if is_named_tuple(tp):
        return _named_tuple_fields(value)
    return _attribute_fields(value)


# End of file: src/mstair/stringify/stringifier/reflection.py
