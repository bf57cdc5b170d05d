"""Schema marker types: classes that know their own schema name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

__all__ = ["Schema", "plat_schema"]

_T = TypeVar("_T", bound=type)


class Schema(ABC):
    """Something that has a fixed schema name."""

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        """Return the schema name of this type."""


def plat_schema(cls: _T) -> _T:
    """Class decorator that makes ``cls`` a Schema named after the class.

    The name is fixed when the decorator runs, so subclasses inherit it
    unless they are decorated themselves.
    """
    if not isinstance(cls, type):
        raise TypeError("plat_schema can only decorate classes")
    name_str = cls.__name__

    def name(_cls: type) -> str:
        return name_str

    name.__doc__ = f"Return the schema name {name_str!r}."
    cls.name = classmethod(name)
    Schema.register(cls)
    return cls