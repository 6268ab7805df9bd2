from __future__ import annotations

from typing import Any


class IOCWireError(Exception):
    """Represent a base class for all iocwire-specific failures.

    Catch this type when you want to handle any iocwire error path without
    matching each concrete exception class individually.
    """


class IOCWireInvalidBindingError(IOCWireError):
    """Signal an invalid ``bind``/``singleton`` call.

    Raised at registration time, never during resolution, when a singleton
    binding receives a class (or import path) instead of a live instance, or
    when a transient binding receives something that is not an existing,
    constructible class.

    Typical fixes include passing an instance to ``singleton(...)``, passing a
    concrete class (not an abstract contract) as a transient provider, and
    checking import paths for typos.
    """

    def __init__(self, message: str, *, service: Any, provider: Any) -> None:
        super().__init__(message)
        self.service = service
        self.provider = provider


class IOCWireTargetNotFoundError(IOCWireError):
    """Signal that a ``run`` target type or method does not exist.

    Raised before any resolution work begins, so no constructor of the target
    graph has been called when this error surfaces.
    """

    def __init__(self, message: str, *, target: Any, method_name: str | None = None) -> None:
        super().__init__(message)
        self.target = target
        self.method_name = method_name


class IOCWireMissingParameterError(IOCWireError):
    """Signal that a scalar parameter has no value source.

    Base class for the constructor and method flavours below.
    """

    def __init__(self, message: str, *, owner: str, parameter_name: str) -> None:
        super().__init__(message)
        self.owner = owner
        self.parameter_name = parameter_name


class IOCWireMissingRequiredParameterError(IOCWireMissingParameterError):
    """Signal a scalar method parameter without a named argument or default.

    Raised by ``run``/``call`` while binding arguments. Typical fix is adding
    the parameter name to ``named_args`` or declaring a default value.
    """


class IOCWireMissingScalarDependencyError(IOCWireMissingParameterError):
    """Signal a scalar constructor parameter without a default value.

    Constructors only receive object dependencies from the container; named
    arguments never reach them. Typical fixes include declaring a default,
    wrapping the scalar in a settings class, or registering a pre-built
    instance with ``singleton(...)``.
    """


class IOCWireCircularDependencyError(IOCWireError):
    """Signal a dependency cycle among constructor parameters.

    ``chain`` lists the classes in construction order, ending with the class
    that re-entered construction.
    """

    def __init__(self, message: str, *, chain: tuple[Any, ...]) -> None:
        super().__init__(message)
        self.chain = chain


class IOCWireDependencyNotRegisteredError(IOCWireError):
    """Signal that an object dependency has no binding and cannot be built.

    Raised for abstract contracts (ABCs, Protocols) with no binding, and for any
    unbound class when the container runs with
    ``autoregister_concrete_types=False``.

    Typical fix is ``bind(Contract, Implementation)`` or
    ``singleton(Contract, instance)`` before resolution.
    """

    def __init__(self, message: str, *, service: Any) -> None:
        super().__init__(message)
        self.service = service


class IOCWireSignatureInspectionError(IOCWireError):
    """Signal that a callable signature or its annotations cannot be inspected.

    Common triggers are forward references to names that do not exist in the
    defining module and builtins that expose no signature.
    """
