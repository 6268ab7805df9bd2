from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from iocwire._internal.bindings import Binding, BindingsRegistry, UserService
from iocwire._internal.invoker import Invoker
from iocwire._internal.resolver import InstanceResolver
from iocwire._internal.signatures import SignatureIntrospector
from iocwire.lock_mode import LockMode

T = TypeVar("T")


class Container:
    """Hold bindings and run methods with automatically resolved arguments.

    Dependency keys are classes: concrete classes, abstract base classes, or
    Protocols used as contracts. Parameters annotated with such a class are
    object-kind and are built by the container; every other parameter is
    scalar-kind and is filled from named arguments (methods) or declared
    defaults.

    Unbound concrete classes are constructed directly. Bind a contract to an
    implementation with ``bind`` and share one instance with ``singleton``.
    """

    def __init__(
        self,
        *,
        lock_mode: LockMode = LockMode.THREAD,
        autoregister_concrete_types: bool = True,
    ) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: Locking strategy for the bindings registry.
            autoregister_concrete_types: Construct unbound concrete classes on
                demand. Disable for strict mode, where every object dependency
                must be bound explicitly.

        Examples:
            .. code-block:: python

                container = Container()

                strict_container = Container(autoregister_concrete_types=False)

                single_threaded = Container(lock_mode=LockMode.NONE)

        """
        self._registry = BindingsRegistry(lock_mode=lock_mode)
        self._introspector = SignatureIntrospector()
        self._resolver = InstanceResolver(
            registry=self._registry,
            introspector=self._introspector,
            autoregister_concrete_types=autoregister_concrete_types,
        )
        self._invoker = Invoker(resolver=self._resolver, introspector=self._introspector)

    @property
    def registry(self) -> BindingsRegistry:
        return self._registry

    def bind(self, service: UserService, provider: Any, singleton: bool = False) -> None:  # noqa: FBT001, FBT002
        """Bind a service to a provider, replacing any previous binding.

        Args:
            service: Contract or class to bind, or its dotted import path.
            provider: A concrete class (or import path) built fresh on every
                resolution, or a live instance when ``singleton`` is true.
            singleton: Share ``provider`` with every consumer.

        Raises:
            IOCWireInvalidBindingError: If ``provider`` does not match the
                binding kind.

        Examples:
            .. code-block:: python

                container.bind(StorageEngine, RedisEngine)
                container.bind("app.storage.StorageEngine", "app.storage.FileEngine")

        """
        self._registry.bind(service, provider, singleton=singleton)

    def singleton(self, service: UserService, instance: object) -> None:
        """Bind a service to one shared instance.

        Args:
            service: Contract or class to bind, or its dotted import path.
            instance: Pre-built instance returned to every consumer.

        """
        self._registry.singleton(service, instance)

    def lookup(self, service: type[Any]) -> Binding | None:
        """Return the binding for ``service`` or ``None`` when it is unbound."""
        return self._registry.lookup(service)

    def resolve(self, service: type[T]) -> T:
        """Resolve one object dependency the way constructor parameters are resolved.

        Args:
            service: Class or contract to resolve.

        """
        return self._resolver.resolve_dependency(service)

    def run(
        self,
        target: type[Any] | str,
        method_name: str,
        named_args: Mapping[str, Any] | None = None,
    ) -> Any:
        """Construct ``target`` and call ``method_name`` with resolved arguments.

        The target class is always constructed directly; its constructor and
        method object dependencies go through the bindings. Scalar method
        parameters are matched to ``named_args`` by name and fall back to their
        declared defaults.

        Args:
            target: Class to construct, or its dotted import path.
            method_name: Method to call on the new instance.
            named_args: Values for scalar method parameters, keyed by name.

        Raises:
            IOCWireTargetNotFoundError: If the class or method does not exist.
            IOCWireMissingRequiredParameterError: If a scalar method parameter
                has neither a named argument nor a default.
            IOCWireMissingScalarDependencyError: If a scalar constructor
                parameter has no default.
            IOCWireCircularDependencyError: If constructors depend on each
                other in a cycle.

        Examples:
            .. code-block:: python

                container.singleton(Foo, Foo())
                container.bind(StorageEngine, RedisEngine)
                container.run(Controller, "index", {"name": "cat", "age": 5})

        """
        return self._invoker.run(target, method_name, named_args)

    def call(
        self,
        callable_obj: Callable[..., T],
        named_args: Mapping[str, Any] | None = None,
    ) -> T:
        """Call a function or bound method with resolved arguments.

        Args:
            callable_obj: Function, static method, or bound method to call.
            named_args: Values for scalar parameters, keyed by name.

        """
        return self._invoker.call(callable_obj, named_args)


__all__ = ["Container"]
