from __future__ import annotations

import datetime
import decimal
import enum
import importlib
import inspect
import pathlib
import types
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard

_NON_DEPENDENCY_MODULES = frozenset({"builtins", "typing", "typing_extensions"})
_MISSING = object()


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_contract(candidate: type[Any]) -> bool:
    """Return true for abstract classes and Protocols, which cannot be constructed."""
    return inspect.isabstract(candidate) or bool(getattr(candidate, "_is_protocol", False))


def import_type(path: str) -> type[Any] | None:
    """Import a class from a dotted path such as ``"package.module.Outer.Inner"``.

    Returns ``None`` when no module prefix of the path is importable or the
    remaining attribute chain does not end in a class.
    """
    parts = path.split(".")
    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        try:
            candidate: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        for attribute in parts[split_at:]:
            candidate = getattr(candidate, attribute, _MISSING)
            if candidate is _MISSING:
                return None
        return candidate if is_runtime_class(candidate) else None
    return None


def type_name(candidate: Any) -> str:
    """Return a readable name for classes, callables, and arbitrary values."""
    qualname = getattr(candidate, "__qualname__", None)
    if qualname is not None:
        return qualname
    return repr(candidate)


@dataclass(frozen=True, slots=True)
class ScalarTypePolicy:
    """Classify annotations as object dependencies or scalar values.

    Object-kind types are resolved from the container; everything else is
    supplied by named arguments or defaults.
    """

    value_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
        enum.Enum,
    )

    def is_object_type(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when an annotation names a class the container should build.

        Args:
            candidate: Unwrapped parameter annotation.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ in _NON_DEPENDENCY_MODULES:
            return False
        if issubclass(candidate, type):
            return False
        return not issubclass(candidate, self.value_base_types)


__all__ = [
    "ScalarTypePolicy",
    "import_type",
    "is_contract",
    "is_runtime_class",
    "type_name",
]
