from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from iocwire._internal.bindings import Binding, UserService
from iocwire.container import Container

T = TypeVar("T")


class ContainerContext:
    """Process-wide container proxy.

    Starts with an empty container and never tears it down. The active
    container binding is process-global for this ``ContainerContext`` instance;
    it is not task-local or thread-local.
    """

    def __init__(self) -> None:
        self._container = Container()

    def set_current(self, container: Container) -> Container:
        """Install ``container`` as the active container and return the previous one."""
        previous = self._container
        self._container = container
        return previous

    def get_current(self) -> Container:
        """Return the active container."""
        return self._container

    def bind(self, service: UserService, provider: Any, singleton: bool = False) -> None:  # noqa: FBT001, FBT002
        """Bind on the active container. See ``Container.bind``."""
        self._container.bind(service, provider, singleton)

    def singleton(self, service: UserService, instance: object) -> None:
        """Bind a shared instance on the active container. See ``Container.singleton``."""
        self._container.singleton(service, instance)

    def lookup(self, service: type[Any]) -> Binding | None:
        return self._container.lookup(service)

    def resolve(self, service: type[T]) -> T:
        return self._container.resolve(service)

    def run(
        self,
        target: type[Any] | str,
        method_name: str,
        named_args: Mapping[str, Any] | None = None,
    ) -> Any:
        """Run a method on the active container. See ``Container.run``."""
        return self._container.run(target, method_name, named_args)

    def call(
        self,
        callable_obj: Callable[..., T],
        named_args: Mapping[str, Any] | None = None,
    ) -> T:
        return self._container.call(callable_obj, named_args)


container_context = ContainerContext()

bind = container_context.bind
singleton = container_context.singleton
run = container_context.run

__all__ = ["ContainerContext", "bind", "container_context", "run", "singleton"]
