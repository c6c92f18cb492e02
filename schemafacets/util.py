from __future__ import annotations

import dataclasses
import inspect
from typing import Dict, MutableSet, Optional, Type, TypeVar

__all__ = ("TypeMap", "get_name", "slotted")


VT = TypeVar("VT")


def get_name(obj: Type) -> str:
    """Safely retrieve the name of a class or callable."""
    return getattr(obj, "__name__", None) or obj.__class__.__name__


class TypeMap(Dict[Type, VT]):
    """A mapping of operand type -> value, with lookups which fall back to parents.

    Lookups never write back to the map, so registering a type later on is seen by
    all of its subclasses.
    """

    def get_by_parent(self, t: Type, default: VT = None) -> Optional[VT]:
        """Return the value for `t` or its nearest registered parent in the MRO."""
        if not inspect.isclass(t):
            return self.get(t, default)
        return next(
            (self[ptype] for ptype in inspect.getmro(t) if ptype in self), default
        )


def slotted(
    _cls: Type = None,
    *,
    dict: bool = True,
    weakref: bool = False,
):
    """Decorator to create a "slotted" version of the provided dataclass.

    Returns new class object as it's not possible to add __slots__ after class creation.

    Source: https://github.com/starhel/dataslots/blob/master/dataslots/__init__.py
    """

    def _slots_setstate(self, state):
        for param_dict in filter(None, state):
            for slot, value in param_dict.items():
                object.__setattr__(self, slot, value)

    def wrap(cls):
        key = repr(cls)
        if key in _stack:
            raise TypeError(
                f"{cls!r} uses a custom metaclass {cls.__class__!r} "
                "which is not compatible with automatic slots."
            ) from None

        _stack.add(key)

        cls_dict = {**cls.__dict__}
        # Create only missing slots
        inherited_slots = set().union(
            *(getattr(c, "__slots__", set()) for c in cls.mro())
        )

        field_names = {f.name for f in dataclasses.fields(cls)}
        if dict:
            field_names.add("__dict__")
        if weakref:
            field_names.add("__weakref__")
        cls_dict["__slots__"] = (*(field_names - inherited_slots),)

        # Erase field names from class __dict__
        for f in field_names:
            cls_dict.pop(f, None)

        # Erase __dict__ and __weakref__
        cls_dict.pop("__dict__", None)
        cls_dict.pop("__weakref__", None)

        # Pickle fix for frozen dataclass as mentioned in https://bugs.python.org/issue36424
        if (
            all(param not in cls_dict for param in ["__getstate__", "__setstate__"])
            and cls.__dataclass_params__.frozen
        ):
            cls_dict["__setstate__"] = _slots_setstate

        # Prepare new class with slots
        new_cls = cls.__class__(cls.__name__, cls.__bases__, cls_dict)
        new_cls.__qualname__ = cls.__qualname__
        new_cls.__module__ = cls.__module__

        _stack.clear()
        return new_cls

    return wrap if _cls is None else wrap(_cls)


_stack: MutableSet[str] = set()
