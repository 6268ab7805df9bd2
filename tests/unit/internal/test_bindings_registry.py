import logging
from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from iocwire._internal.bindings import Binding, BindingsRegistry
from iocwire.exceptions import IOCWireInvalidBindingError
from iocwire.lock_mode import LockMode


class Contract(ABC):
    @abstractmethod
    def run(self) -> None: ...


class Implementation(Contract):
    def run(self) -> None:
        return None


class OtherImplementation(Contract):
    def run(self) -> None:
        return None


class Reader(Protocol):
    def read(self) -> str: ...


@pytest.fixture(params=[LockMode.THREAD, LockMode.NONE], ids=["thread", "none"])
def registry(request: pytest.FixtureRequest) -> BindingsRegistry:
    return BindingsRegistry(lock_mode=request.param)


def test_new_registry_is_empty(registry: BindingsRegistry) -> None:
    assert len(registry) == 0
    assert registry.lookup(Contract) is None


def test_bind_transient(registry: BindingsRegistry) -> None:
    binding = registry.bind(Contract, Implementation)

    assert binding == Binding(service=Contract, provider=Implementation, is_singleton=False)
    assert registry.lookup(Contract) is binding


def test_bind_singleton(registry: BindingsRegistry) -> None:
    instance = Implementation()

    binding = registry.singleton(Contract, instance)

    assert binding.is_singleton is True
    assert binding.provider is instance


def test_bind_with_singleton_flag_matches_singleton_sugar(registry: BindingsRegistry) -> None:
    instance = Implementation()

    assert registry.bind(Contract, instance, singleton=True) == registry.singleton(
        Contract,
        instance,
    )


def test_rebinding_overwrites(registry: BindingsRegistry) -> None:
    registry.bind(Contract, Implementation)
    registry.bind(Contract, OtherImplementation)

    binding = registry.lookup(Contract)

    assert binding is not None
    assert binding.provider is OtherImplementation
    assert len(registry) == 1


def test_singleton_can_replace_transient(registry: BindingsRegistry) -> None:
    registry.bind(Contract, Implementation)
    instance = OtherImplementation()
    registry.singleton(Contract, instance)

    binding = registry.lookup(Contract)

    assert binding is not None
    assert binding.provider is instance


def test_import_paths_are_normalized_to_classes(registry: BindingsRegistry) -> None:
    registry.bind(f"{__name__}.Contract", f"{__name__}.Implementation")

    binding = registry.lookup(Contract)

    assert binding is not None
    assert binding.service is Contract
    assert binding.provider is Implementation


def test_protocol_can_be_a_service(registry: BindingsRegistry) -> None:
    class FileReader:
        def read(self) -> str:
            return "data"

    registry.bind(Reader, FileReader)

    assert registry.lookup(Reader) is not None


@pytest.mark.parametrize(
    "provider",
    [Implementation, f"{__name__}.Implementation", "Implementation"],
)
def test_singleton_rejects_non_instances(registry: BindingsRegistry, provider: object) -> None:
    with pytest.raises(IOCWireInvalidBindingError):
        registry.bind(Contract, provider, singleton=True)


@pytest.mark.parametrize(
    "provider",
    ["NoSuchType", "no_such_module.NoSuchType", f"{__name__}.Missing", Implementation(), 42],
)
def test_transient_rejects_missing_or_non_class_providers(
    registry: BindingsRegistry,
    provider: object,
) -> None:
    with pytest.raises(IOCWireInvalidBindingError):
        registry.bind(Contract, provider)


@pytest.mark.parametrize("provider", [Contract, Reader])
def test_transient_rejects_abstract_providers(registry: BindingsRegistry, provider: type) -> None:
    with pytest.raises(IOCWireInvalidBindingError, match="abstract"):
        registry.bind(Implementation, provider)


@pytest.mark.parametrize("service", [42, Implementation(), "no_such_module.Contract"])
def test_rejects_invalid_services(registry: BindingsRegistry, service: object) -> None:
    with pytest.raises(IOCWireInvalidBindingError):
        registry.bind(service, Implementation)  # type: ignore[arg-type]


def test_bind_logs_debug_record(
    registry: BindingsRegistry,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.DEBUG, logger="iocwire._internal.bindings"):
        registry.bind(Contract, Implementation)

    assert "Bound Contract to Implementation (singleton=False)" in caplog.messages
