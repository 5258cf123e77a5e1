"""
rolodex utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the tokenizer, the validated values and the
  resolvers so that they agree on sentinel, naming and immutability semantics.

Overview
- UnsetType / Unset
  • Singleton sentinel for "nothing decided yet", distinct from None (None is a
    legitimate payload, e.g. an absent optional field of an edit).
- nullify(object, default=None)
  • Replace Unset with a concrete default, preserving None/0/""/[].
- rename(callable, name) / @rename("name")
  • Stable __name__/__qualname__ for generated callables.
- Sealed
  • Construction-phase guard: backing fields (names starting with '-') may be
    written only inside the `with Sealed.__new__(cls) as self:` block.
- view("field")
  • Read-only property over a sealed backing field, returning immutable views
    of containers.
"""
import functools
from collections.abc import Sequence, Mapping, Set
from contextlib import contextmanager
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process-wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def nullify(object, default=None, /):
    """
    return `default` when `object` is Unset; otherwise return `object` unchanged.
    """
    return default if object is Unset else object


def rename(x, /, name=None):
    """
    set a stable __name__/__qualname__ on a callable, or return a curried renamer.

    - rename(callable, name) renames in place and returns the callable.
    - rename(name) returns a decorator applying that name later.
    """
    if isinstance(x, str):
        return functools.partial(rename, name=x)
    if not isinstance(name, str):
        raise TypeError("callable name must be a string")
    x.__qualname__ = name
    x.__name__ = name
    return x


class Sealed:
    """
    internal mixin that locks backing storage once construction is over.

    rules
    - attributes whose name starts with '-' are backing fields:
      • they cannot be read through normal attribute access,
      • they can only be written while the instance is being built.
    - any other attribute assignment is refused as well: sealed objects are
      immutable from the outside.

    build phase
        with super().__new__(cls) as self:
            setattr(self, "-value", value)
        # from here on the instance is frozen
    """

    @contextmanager
    def __new__(cls, *unused, **options):
        self = object.__new__(cls)
        object.__setattr__(self, "_Sealed__building", True)
        try:
            yield self
        finally:
            object.__setattr__(self, "_Sealed__building", False)

    def __getattribute__(self, name, /):
        if isinstance(name, str) and name.startswith("-"):
            raise AttributeError("internal storage is not accessible")
        return object.__getattribute__(self, name)

    def __setattr__(self, name, value, /):
        if not object.__getattribute__(self, "_Sealed__building"):
            raise AttributeError(f"{type(self).__name__!r} object is read-only")
        return object.__setattr__(self, name, value)

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is read-only")


def view(name):
    """
    internal: build a read-only property over the backing field '-{name}'.

    containers come back as immutable views:
    - Sequence (non-str) → tuple
    - Mapping            → MappingProxyType
    - Set                → frozenset
    """

    @rename(name)
    def getter(self):
        value = object.__getattribute__(self, "-" + name)
        if isinstance(value, Sequence) and not isinstance(value, str):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        if isinstance(value, Set):
            return frozenset(value)
        return value

    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "nullify",
    "rename",
    "Sealed",
    "view",
)
