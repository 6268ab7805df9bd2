import logging
from abc import ABC, abstractmethod

import pytest

from iocwire._internal.bindings import BindingsRegistry
from iocwire._internal.resolver import InstanceResolver
from iocwire.exceptions import (
    IOCWireCircularDependencyError,
    IOCWireDependencyNotRegisteredError,
    IOCWireMissingScalarDependencyError,
)


class Engine(ABC):
    @abstractmethod
    def name(self) -> str: ...


class RedisEngine(Engine):
    def name(self) -> str:
        return "redis"


class FileEngine(Engine):
    def name(self) -> str:
        return "file"


class Cache:
    def __init__(self, engine: Engine, ttl: int = 60) -> None:
        self.engine = engine
        self.ttl = ttl


class Left:
    def __init__(self, right: "Right") -> None:
        self.right = right


class Right:
    def __init__(self, left: Left) -> None:
        self.left = left


@pytest.fixture()
def registry() -> BindingsRegistry:
    return BindingsRegistry()


@pytest.fixture()
def resolver(registry: BindingsRegistry) -> InstanceResolver:
    return InstanceResolver(registry=registry)


def test_resolve_instance_ignores_binding_of_requested_class(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    shared = RedisEngine()
    registry.singleton(RedisEngine, shared)

    assert resolver.resolve_instance(RedisEngine) is not shared
    assert resolver.resolve_dependency(RedisEngine) is shared


def test_contract_indirection_builds_bound_provider(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    registry.bind(Engine, FileEngine)

    cache = resolver.resolve_instance(Cache)

    assert type(cache.engine) is FileEngine
    assert cache.ttl == 60


def test_transient_binding_ignores_singleton_of_provider(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    shared = RedisEngine()
    registry.bind(Engine, RedisEngine)
    registry.singleton(RedisEngine, shared)

    first = resolver.resolve_dependency(Engine)
    second = resolver.resolve_dependency(Engine)

    assert type(first) is RedisEngine
    assert first is not shared
    assert first is not second


def test_transient_binding_does_not_follow_provider_binding(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    registry.bind(Engine, RedisEngine)
    registry.bind(RedisEngine, FileEngine)

    assert type(resolver.resolve_dependency(Engine)) is RedisEngine
    assert type(resolver.resolve_dependency(RedisEngine)) is FileEngine


def test_self_binding_builds_the_class(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    registry.bind(RedisEngine, RedisEngine)

    first = resolver.resolve_dependency(RedisEngine)
    second = resolver.resolve_dependency(RedisEngine)

    assert type(first) is RedisEngine
    assert first is not second


def test_mutually_bound_providers_resolve_one_step(
    registry: BindingsRegistry,
    resolver: InstanceResolver,
) -> None:
    registry.bind(RedisEngine, FileEngine)
    registry.bind(FileEngine, RedisEngine)

    assert type(resolver.resolve_dependency(RedisEngine)) is FileEngine
    assert type(resolver.resolve_dependency(FileEngine)) is RedisEngine


def test_unbound_contract_is_not_constructed(resolver: InstanceResolver) -> None:
    with pytest.raises(IOCWireDependencyNotRegisteredError):
        resolver.resolve_instance(Cache)


def test_strict_mode_allows_bound_dependencies(registry: BindingsRegistry) -> None:
    resolver = InstanceResolver(registry=registry, autoregister_concrete_types=False)
    registry.bind(Engine, RedisEngine)

    cache = resolver.resolve_instance(Cache)

    assert type(cache.engine) is RedisEngine


def test_strict_mode_rejects_unbound_dependencies(registry: BindingsRegistry) -> None:
    resolver = InstanceResolver(registry=registry, autoregister_concrete_types=False)

    with pytest.raises(IOCWireDependencyNotRegisteredError) as exc_info:
        resolver.resolve_instance(Cache)

    assert exc_info.value.service is Engine


def test_cycle_is_detected(resolver: InstanceResolver) -> None:
    with pytest.raises(IOCWireCircularDependencyError) as exc_info:
        resolver.resolve_instance(Left)

    assert exc_info.value.chain == (Left, Right, Left)


def test_cycle_broken_by_singleton(registry: BindingsRegistry, resolver: InstanceResolver) -> None:
    left = Left.__new__(Left)
    registry.singleton(Left, left)

    right = resolver.resolve_instance(Right)

    assert right.left is left


def test_construction_chain_is_reset_after_failure(resolver: InstanceResolver) -> None:
    with pytest.raises(IOCWireCircularDependencyError):
        resolver.resolve_instance(Left)

    assert isinstance(resolver.resolve_instance(RedisEngine), RedisEngine)


def test_same_class_twice_in_one_graph_is_not_a_cycle(resolver: InstanceResolver) -> None:
    class Pair:
        def __init__(self, first: RedisEngine, second: RedisEngine) -> None:
            self.first = first
            self.second = second

    pair = resolver.resolve_instance(Pair)

    assert pair.first is not pair.second


def test_missing_scalar_dependency(resolver: InstanceResolver) -> None:
    class Client:
        def __init__(self, host: str, engine: RedisEngine) -> None:
            self.host = host

    with pytest.raises(IOCWireMissingScalarDependencyError) as exc_info:
        resolver.resolve_instance(Client)

    assert exc_info.value.parameter_name == "host"


def test_keyword_only_constructor_parameters(resolver: InstanceResolver) -> None:
    class Client:
        def __init__(self, *, engine: RedisEngine, retries: int = 2) -> None:
            self.engine = engine
            self.retries = retries

    client = resolver.resolve_instance(Client)

    assert isinstance(client.engine, RedisEngine)
    assert client.retries == 2


def test_construction_logs_debug_record(
    resolver: InstanceResolver,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.DEBUG, logger="iocwire._internal.resolver"):
        resolver.resolve_instance(RedisEngine)

    assert "Constructed RedisEngine with 0 argument(s)" in caplog.messages
