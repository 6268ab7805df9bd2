from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from inspect import Parameter
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from iocwire._internal.type_checks import ScalarTypePolicy, type_name
from iocwire.exceptions import IOCWireSignatureInspectionError

_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)
_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)
_GENERATED_INIT_MARKERS = (
    "__dataclass_fields__",
    "__attrs_attrs__",
    "__struct_fields__",
    "_fields",
)


class ParameterKind(Enum):
    """Classify how a parameter receives its value."""

    OBJECT = "object"
    """Built or looked up by the container."""

    SCALAR = "scalar"
    """Taken from named arguments or the declared default."""


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describe one introspected parameter of a constructor or method."""

    name: str
    kind: ParameterKind
    provides: type[Any] | None
    """Declared class for object-kind parameters, ``None`` for scalars."""
    has_default: bool
    default: Any
    parameter: Parameter

    @property
    def is_keyword_only(self) -> bool:
        return self.parameter.kind is Parameter.KEYWORD_ONLY


@dataclass(slots=True)
class ResolvedArguments:
    """Resolved values in declared parameter order."""

    values: list[tuple[ParameterDescriptor, Any]] = field(default_factory=list)

    def append(self, descriptor: ParameterDescriptor, value: Any) -> None:
        self.values.append((descriptor, value))

    def apply(self, target: Callable[..., Any]) -> Any:
        """Call ``target`` positionally, passing keyword-only parameters by name."""
        args = [value for descriptor, value in self.values if not descriptor.is_keyword_only]
        kwargs = {
            descriptor.name: value for descriptor, value in self.values if descriptor.is_keyword_only
        }
        return target(*args, **kwargs)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(slots=True)
class SignatureIntrospector:
    """Turn constructor and method signatures into parameter descriptors.

    A parameter is object-kind when its annotation names a non-builtin,
    non-value class (see ``ScalarTypePolicy``); abstract classes and Protocols
    count as object-kind contracts. ``Annotated[...]`` and ``Optional[...]``
    wrappers are stripped before classification. Everything else, including
    unannotated parameters, is scalar-kind. ``*args`` and ``**kwargs`` are
    skipped.
    """

    scalar_type_policy: ScalarTypePolicy = field(default_factory=ScalarTypePolicy)

    def introspect_constructor(self, cls: type[Any]) -> list[ParameterDescriptor]:
        """Return constructor parameter descriptors for ``cls``.

        Classes that inherit ``object``'s constructor and publish no
        ``__signature__`` have no dependencies and produce an empty list.

        Args:
            cls: Class whose constructor is inspected.

        """
        if (
            cls.__init__ is object.__init__
            and cls.__new__ is object.__new__
            and getattr(cls, "__signature__", None) is None
        ):
            return []
        return self._introspect(callable_obj=cls, owner_name=type_name(cls))

    def introspect_callable(self, callable_obj: Callable[..., Any]) -> list[ParameterDescriptor]:
        """Return parameter descriptors for a function or bound method.

        Args:
            callable_obj: Callable whose signature is inspected. Bound methods
                exclude ``self``/``cls`` automatically.

        """
        return self._introspect(callable_obj=callable_obj, owner_name=type_name(callable_obj))

    def _introspect(
        self,
        *,
        callable_obj: Callable[..., Any],
        owner_name: str,
    ) -> list[ParameterDescriptor]:
        try:
            signature = inspect.signature(callable_obj)
        except (TypeError, ValueError) as error:
            msg = f"Unable to read the signature of '{owner_name}': {error}"
            raise IOCWireSignatureInspectionError(msg) from error

        annotations, annotation_error = self._resolved_type_hints(callable_obj)
        descriptors: list[ParameterDescriptor] = []
        for parameter in signature.parameters.values():
            if parameter.kind in _VARIADIC_KINDS:
                continue
            annotation = self._parameter_annotation(
                parameter=parameter,
                annotations=annotations,
                annotation_error=annotation_error,
                owner_name=owner_name,
            )
            descriptors.append(self._describe(parameter=parameter, annotation=annotation))
        return descriptors

    def _describe(self, *, parameter: Parameter, annotation: Any) -> ParameterDescriptor:
        unwrapped = self._unwrap_annotation(annotation)
        is_object = annotation is not Parameter.empty and (
            self.scalar_type_policy.is_object_type(unwrapped)
        )
        has_default = parameter.default is not Parameter.empty
        return ParameterDescriptor(
            name=parameter.name,
            kind=ParameterKind.OBJECT if is_object else ParameterKind.SCALAR,
            provides=unwrapped if is_object else None,
            has_default=has_default,
            default=parameter.default if has_default else None,
            parameter=parameter,
        )

    def _parameter_annotation(
        self,
        *,
        parameter: Parameter,
        annotations: dict[str, Any],
        annotation_error: Exception | None,
        owner_name: str,
    ) -> Any:
        if parameter.name in annotations:
            return annotations[parameter.name]

        raw_annotation = parameter.annotation
        if not isinstance(raw_annotation, str):
            return raw_annotation

        msg = (
            f"Unable to evaluate annotation {raw_annotation!r} of parameter "
            f"'{parameter.name}' in '{owner_name}'."
        )
        if annotation_error is None:
            raise IOCWireSignatureInspectionError(msg)
        msg = f"{msg} Original annotation error: {annotation_error}"
        raise IOCWireSignatureInspectionError(msg) from annotation_error

    def _unwrap_annotation(self, annotation: Any) -> Any:
        if get_origin(annotation) is Annotated:
            return self._unwrap_annotation(get_args(annotation)[0])
        if get_origin(annotation) in _UNION_ORIGINS:
            members = [member for member in get_args(annotation) if member is not type(None)]
            if len(members) == 1:
                return self._unwrap_annotation(members[0])
        return annotation

    def _resolved_type_hints(
        self,
        callable_obj: Callable[..., Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        annotations: dict[str, Any] = {}
        annotation_error: Exception | None = None

        members: tuple[Any, ...] = (callable_obj,)
        if inspect.isclass(callable_obj):
            members = (callable_obj.__init__, callable_obj.__new__)
            if _has_generated_init(callable_obj):
                # Field annotations back the parameters of generated constructors.
                members = (*members, callable_obj)

        for member in members:
            try:
                member_annotations = get_type_hints(member, include_extras=True)
            except (AttributeError, NameError, TypeError) as error:
                if annotation_error is None:
                    annotation_error = error
                continue
            for parameter_name, parameter_annotation in member_annotations.items():
                annotations.setdefault(parameter_name, parameter_annotation)

        return annotations, annotation_error


def _has_generated_init(cls: type[Any]) -> bool:
    """Return true for dataclass, attrs, msgspec and named tuple classes."""
    return any(hasattr(cls, marker) for marker in _GENERATED_INIT_MARKERS)


__all__ = [
    "ParameterDescriptor",
    "ParameterKind",
    "ResolvedArguments",
    "SignatureIntrospector",
]
