"""pytest fixtures for isolating the process-wide container.

Enable with ``pytest_plugins = ["iocwire.integrations.pytest_plugin"]`` in the
root ``conftest.py``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from iocwire.container import Container
from iocwire.container_context import container_context


def install_fresh_container() -> Iterator[Container]:
    """Install a fresh container and restore the previous one when closed."""
    container = Container()
    previous = container_context.set_current(container)
    try:
        yield container
    finally:
        container_context.set_current(previous)


@pytest.fixture()
def iocwire_container() -> Iterator[Container]:
    """Install a fresh container into ``container_context`` for one test.

    Bindings made through ``iocwire.bind``/``iocwire.singleton`` during the test
    land in this container and disappear afterwards. The previously active
    container is restored on teardown.

    Yields:
        The container active for the duration of the test.

    """
    yield from install_fresh_container()
