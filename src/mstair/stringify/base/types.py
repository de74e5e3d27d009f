# File: src/mstair/stringify/base/types.py

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar, Final, Self


# ---------- Runtime tuples (for isinstance/issubclass) ----------

PRIMITIVE_NON_STRING_TYPES: Final[tuple[type, ...]] = (
    int,
    float,
    complex,
    bool,
    Decimal,
    Fraction,
    type(None),
)
TEXTUAL_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


class Sentinel:
    """
    Base for falsy singleton markers that must stay distinct from None.

    Each subclass has exactly one instance, which survives copy and pickle.
    """

    __slots__ = ()

    _repr_name: ClassVar[str] = "SENTINEL"
    _instances: ClassVar[dict[type, "Sentinel"]] = {}

    def __new__(cls) -> Self:
        instance = Sentinel._instances.get(cls)
        if instance is None:
            instance = Sentinel._instances[cls] = super().__new__(cls)
        return instance  # type: ignore[return-value]

    def __repr__(self) -> str:
        return self._repr_name

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (type(self), ())


class Missing(Sentinel):
    """Marks a value that was never produced."""

    _repr_name = "MISSING"


MISSING: Final[Missing] = Missing()


@dataclass(frozen=True)
class Outcome[T]:
    """
    Success-or-failure result of one guarded call.

    Exactly one of `value` (on success) or `error` (on failure) is meaningful;
    `ok` tells which.
    """

    value: T | Missing = MISSING
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def attempt(cls, fn: Callable[..., T], *args: Any) -> "Outcome[T]":
        """
        Call `fn(*args)` and capture its result or the `Exception` it raised.

        :param fn: The callable to invoke.
        :param args: Positional arguments for `fn`.
        :return Outcome: A successful outcome holding the return value, or a failed one.
        """
        try:
            return cls(value=fn(*args))
        except Exception as exc:
            return cls(error=exc)

    def unwrap_or(self, default: T) -> T:
        """Return the successful value, or `default` when this outcome failed."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        return default


# End of file: src/mstair/stringify/base/types.py
