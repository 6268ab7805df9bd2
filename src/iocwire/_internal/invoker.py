from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, cast

from iocwire._internal.resolver import InstanceResolver
from iocwire._internal.signatures import (
    ParameterDescriptor,
    ParameterKind,
    ResolvedArguments,
    SignatureIntrospector,
)
from iocwire._internal.type_checks import import_type, is_runtime_class, type_name
from iocwire.exceptions import (
    IOCWireMissingRequiredParameterError,
    IOCWireTargetNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Invoker:
    """Construct a target and call one of its methods with resolved arguments.

    Scalar parameters bind by name: key order in ``named_args`` never matters
    and any parameter with a default may be omitted. Keys that match no scalar
    parameter are ignored.
    """

    resolver: InstanceResolver
    introspector: SignatureIntrospector

    def run(
        self,
        target: type[Any] | str,
        method_name: str,
        named_args: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build ``target`` and return the result of ``target.method_name(...)``.

        Args:
            target: Class to construct, or its dotted import path.
            method_name: Name of the method to invoke on the new instance.
            named_args: Values for scalar method parameters, keyed by name.

        Raises:
            IOCWireTargetNotFoundError: If the class or method does not exist.
                Raised before any construction happens.

        """
        target_type = self._target_type(target)
        if not callable(getattr(target_type, method_name, None)):
            msg = f"Method '{type_name(target_type)}.{method_name}' not found."
            raise IOCWireTargetNotFoundError(msg, target=target, method_name=method_name)

        instance = self.resolver.resolve_instance(target_type)
        return self.call(getattr(instance, method_name), named_args)

    def call(
        self,
        callable_obj: Callable[..., Any],
        named_args: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call a function or bound method with resolved arguments.

        Args:
            callable_obj: Function, static method, or bound method to call.
            named_args: Values for scalar parameters, keyed by name.

        """
        descriptors = self.introspector.introspect_callable(callable_obj)
        arguments = self.bind_arguments(
            descriptors=descriptors,
            named_args=named_args or {},
            owner=type_name(callable_obj),
        )
        logger.debug("Invoking %s with %d argument(s)", type_name(callable_obj), len(arguments))
        return arguments.apply(callable_obj)

    def bind_arguments(
        self,
        *,
        descriptors: list[ParameterDescriptor],
        named_args: Mapping[str, Any],
        owner: str,
    ) -> ResolvedArguments:
        """Resolve every parameter of a method signature in declared order.

        Args:
            descriptors: Introspected parameters of the method.
            named_args: Values for scalar parameters, keyed by name.
            owner: Qualified method name used in error messages.

        Raises:
            IOCWireMissingRequiredParameterError: If a scalar parameter has
                neither a named argument nor a default.

        """
        arguments = ResolvedArguments()
        for descriptor in descriptors:
            if descriptor.kind is ParameterKind.OBJECT:
                value = self.resolver.resolve_dependency(cast("type[Any]", descriptor.provides))
            elif descriptor.name in named_args:
                value = named_args[descriptor.name]
            elif descriptor.has_default:
                value = descriptor.default
            else:
                msg = (
                    f"Parameter '{descriptor.name}' of '{owner}' is required: pass it in "
                    "named arguments or declare a default value."
                )
                raise IOCWireMissingRequiredParameterError(
                    msg,
                    owner=owner,
                    parameter_name=descriptor.name,
                )
            arguments.append(descriptor, value)
        return arguments

    def _target_type(self, target: type[Any] | str) -> type[Any]:
        target_type = import_type(target) if isinstance(target, str) else target
        if not is_runtime_class(target_type):
            msg = f"Target {target!r} is not an existing class."
            raise IOCWireTargetNotFoundError(msg, target=target)
        return target_type


__all__ = ["Invoker"]
