"""Shared pytest fixtures for iocwire tests."""

import pytest

from iocwire.container import Container
from iocwire.lock_mode import LockMode

pytest_plugins = ["iocwire.integrations.pytest_plugin"]


@pytest.fixture()
def container() -> Container:
    """Default container with autoregistration of concrete types enabled."""
    return Container()


@pytest.fixture()
def strict_container() -> Container:
    """Container that refuses to construct unbound classes."""
    return Container(autoregister_concrete_types=False)


@pytest.fixture()
def unlocked_container() -> Container:
    """Container without registry locking."""
    return Container(lock_mode=LockMode.NONE)
