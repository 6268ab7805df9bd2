from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for the bindings registry.

    The registry is process-wide shared state. ``THREAD`` serializes binds and
    lookups so threads never observe a half-written binding table.
    """

    THREAD = "thread"
    """Guard registry reads/writes with ``threading.RLock``."""

    NONE = "none"
    """Disable locking; suitable for strictly single-threaded programs."""
