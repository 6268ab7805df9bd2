from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any, TypeAlias

from iocwire._internal.type_checks import import_type, is_contract, is_runtime_class, type_name
from iocwire.exceptions import IOCWireInvalidBindingError
from iocwire.lock_mode import LockMode

logger = logging.getLogger(__name__)

ServiceKey: TypeAlias = type[Any]
"""A class (or contract) the registry is keyed by."""

UserService: TypeAlias = type[Any] | str
"""A service as given by the user: a class or its dotted import path."""


@dataclass(frozen=True, slots=True)
class Binding:
    """Describe which provider satisfies a service.

    ``provider`` is a live instance for singleton bindings and a concrete class
    for transient ones.
    """

    service: ServiceKey
    provider: Any
    is_singleton: bool


class BindingsRegistry:
    """Store bindings indexed by service class.

    Service keys are unique: binding an existing service replaces the previous
    binding. There is no removal operation.
    """

    def __init__(self, lock_mode: LockMode = LockMode.THREAD) -> None:
        self._bindings: dict[ServiceKey, Binding] = {}
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if lock_mode is LockMode.THREAD else nullcontext()
        )

    def bind(self, service: UserService, provider: Any, *, singleton: bool = False) -> Binding:
        """Validate and store a binding, overwriting any previous one.

        Args:
            service: Contract or class to bind, or its dotted import path.
            provider: Live instance when ``singleton`` is true, otherwise a
                concrete class or its dotted import path.
            singleton: Share ``provider`` with every consumer.

        Raises:
            IOCWireInvalidBindingError: If ``service`` cannot be imported or
                ``provider`` does not match the requested binding kind.

        """
        service_key = self._normalize_service(service=service, provider=provider)
        if singleton:
            binding = self._singleton_binding(service=service_key, instance=provider)
        else:
            binding = self._transient_binding(service=service_key, provider=provider)

        with self._lock:
            self._bindings[service_key] = binding

        provider_type = type(provider) if singleton else binding.provider
        logger.debug(
            "Bound %s to %s (singleton=%s)",
            type_name(service_key),
            type_name(provider_type),
            singleton,
        )
        return binding

    def singleton(self, service: UserService, instance: object) -> Binding:
        """Bind ``service`` to a shared, pre-built instance."""
        return self.bind(service, instance, singleton=True)

    def lookup(self, service: ServiceKey) -> Binding | None:
        """Return the binding for ``service`` or ``None`` when it is unbound."""
        with self._lock:
            return self._bindings.get(service)

    def _normalize_service(self, *, service: UserService, provider: Any) -> ServiceKey:
        if isinstance(service, str):
            imported = import_type(service)
            if imported is None:
                msg = f"Service '{service}' does not name an importable class."
                raise IOCWireInvalidBindingError(msg, service=service, provider=provider)
            return imported
        if not is_runtime_class(service):
            msg = f"Service must be a class or a dotted import path, got {service!r}."
            raise IOCWireInvalidBindingError(msg, service=service, provider=provider)
        return service

    def _singleton_binding(self, *, service: ServiceKey, instance: Any) -> Binding:
        if isinstance(instance, str) or is_runtime_class(instance):
            msg = (
                f"Singleton provider for '{type_name(service)}' must be an instance, "
                f"got {instance!r}."
            )
            raise IOCWireInvalidBindingError(msg, service=service, provider=instance)
        return Binding(service=service, provider=instance, is_singleton=True)

    def _transient_binding(self, *, service: ServiceKey, provider: Any) -> Binding:
        provider_type = import_type(provider) if isinstance(provider, str) else provider
        if not is_runtime_class(provider_type):
            msg = f"Provider {provider!r} for '{type_name(service)}' is not an existing class."
            raise IOCWireInvalidBindingError(msg, service=service, provider=provider)
        if is_contract(provider_type):
            msg = (
                f"Provider '{type_name(provider_type)}' for '{type_name(service)}' is abstract "
                "and cannot be constructed."
            )
            raise IOCWireInvalidBindingError(msg, service=service, provider=provider)
        return Binding(service=service, provider=provider_type, is_singleton=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)


__all__ = ["Binding", "BindingsRegistry", "ServiceKey", "UserService"]
