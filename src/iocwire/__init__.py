from iocwire.container import Container
from iocwire.container_context import ContainerContext, bind, container_context, run, singleton
from iocwire.exceptions import (
    IOCWireCircularDependencyError,
    IOCWireDependencyNotRegisteredError,
    IOCWireError,
    IOCWireInvalidBindingError,
    IOCWireMissingParameterError,
    IOCWireMissingRequiredParameterError,
    IOCWireMissingScalarDependencyError,
    IOCWireSignatureInspectionError,
    IOCWireTargetNotFoundError,
)
from iocwire.lock_mode import LockMode

__all__ = [
    "Container",
    "ContainerContext",
    "IOCWireCircularDependencyError",
    "IOCWireDependencyNotRegisteredError",
    "IOCWireError",
    "IOCWireInvalidBindingError",
    "IOCWireMissingParameterError",
    "IOCWireMissingRequiredParameterError",
    "IOCWireMissingScalarDependencyError",
    "IOCWireSignatureInspectionError",
    "IOCWireTargetNotFoundError",
    "LockMode",
    "bind",
    "container_context",
    "run",
    "singleton",
]
