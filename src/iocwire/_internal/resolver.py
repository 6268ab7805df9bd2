from __future__ import annotations

import logging
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, cast

from iocwire._internal.bindings import BindingsRegistry, ServiceKey
from iocwire._internal.signatures import (
    ParameterDescriptor,
    ParameterKind,
    ResolvedArguments,
    SignatureIntrospector,
)
from iocwire._internal.type_checks import is_contract, type_name
from iocwire.exceptions import (
    IOCWireCircularDependencyError,
    IOCWireDependencyNotRegisteredError,
    IOCWireMissingScalarDependencyError,
)

logger = logging.getLogger(__name__)

# Classes currently under construction in this context, outermost first.
_construction_chain: ContextVar[tuple[type[Any], ...]] = ContextVar(
    "iocwire_construction_chain",
    default=(),
)


@dataclass(slots=True)
class InstanceResolver:
    """Build object graphs from constructor signatures and registry bindings.

    Object-kind parameters are looked up in the registry first: singleton
    bindings hand out the stored instance, transient bindings build a fresh
    instance of the bound provider class, and unbound classes are built
    directly. Scalar constructor parameters only ever receive their declared
    defaults.
    """

    registry: BindingsRegistry
    introspector: SignatureIntrospector = field(default_factory=SignatureIntrospector)
    autoregister_concrete_types: bool = True

    def resolve_dependency(self, service: ServiceKey) -> Any:
        """Resolve an object dependency through the registry.

        A transient binding is a single indirection: the bound provider class
        is constructed directly, even when it carries a binding of its own.

        Args:
            service: Declared class or contract of the dependency.

        Raises:
            IOCWireDependencyNotRegisteredError: If ``service`` is unbound and
                either abstract or autoregistration is disabled.

        """
        binding = self.registry.lookup(service)
        if binding is None:
            if not self.autoregister_concrete_types:
                msg = (
                    f"Dependency '{type_name(service)}' is not bound and autoregistration "
                    "of concrete types is disabled."
                )
                raise IOCWireDependencyNotRegisteredError(msg, service=service)
            return self.resolve_instance(service)

        if binding.is_singleton:
            return binding.provider
        return self.resolve_instance(binding.provider)

    def resolve_instance(self, cls: type[Any]) -> Any:
        """Construct a fresh instance of ``cls`` with resolved constructor arguments.

        The registry is not consulted for ``cls`` itself, only for its
        constructor's object dependencies.

        Args:
            cls: Concrete class to construct.

        Raises:
            IOCWireCircularDependencyError: If ``cls`` is already under construction.
            IOCWireDependencyNotRegisteredError: If ``cls`` is abstract.
            IOCWireMissingScalarDependencyError: If a scalar constructor
                parameter has no default.

        """
        chain = _construction_chain.get()
        if cls in chain:
            cycle = (*chain[chain.index(cls) :], cls)
            msg = "Circular dependency detected: " + " -> ".join(type_name(c) for c in cycle)
            raise IOCWireCircularDependencyError(msg, chain=cycle)
        if is_contract(cls):
            msg = f"'{type_name(cls)}' is abstract; bind it to a concrete provider first."
            raise IOCWireDependencyNotRegisteredError(msg, service=cls)

        token = _construction_chain.set((*chain, cls))
        try:
            arguments = ResolvedArguments()
            for descriptor in self.introspector.introspect_constructor(cls):
                arguments.append(descriptor, self._constructor_value(cls, descriptor))
            instance = arguments.apply(cls)
        finally:
            _construction_chain.reset(token)

        logger.debug("Constructed %s with %d argument(s)", type_name(cls), len(arguments))
        return instance

    def _constructor_value(self, cls: type[Any], descriptor: ParameterDescriptor) -> Any:
        if descriptor.kind is ParameterKind.OBJECT:
            return self.resolve_dependency(cast("type[Any]", descriptor.provides))
        if descriptor.has_default:
            return descriptor.default
        msg = (
            f"Constructor parameter '{descriptor.name}' of '{type_name(cls)}' is scalar and has "
            "no default value; constructors do not receive named arguments."
        )
        raise IOCWireMissingScalarDependencyError(
            msg,
            owner=type_name(cls),
            parameter_name=descriptor.name,
        )


__all__ = ["InstanceResolver"]
