"""Selection policies: pick one endpoint from a registry snapshot."""

from __future__ import annotations

from abc import ABC, abstractmethod
import random
import threading
from typing import Mapping

from balancer.endpoint import Endpoint
from balancer.errors import UnknownPolicy


class SelectionPolicy(ABC):
    """Picks one endpoint per request.

    ``endpoints`` is a read-only, point-in-time snapshot of the registry,
    keyed by address in registration order. The registry guarantees it holds
    at least one entry.
    """

    name = ""

    @abstractmethod
    def select(self, endpoints: Mapping[str, Endpoint]) -> Endpoint:
        ...


class RandomPolicy(SelectionPolicy):
    """Uniform-random selection. Stateless apart from its random source."""

    name = "random"

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()

    def select(self, endpoints: Mapping[str, Endpoint]) -> Endpoint:
        values = list(endpoints.values())
        return values[self._rng.randrange(len(values))]


class RoundRobinPolicy(SelectionPolicy):
    """Cycles through the snapshot in registration order.

    The cursor is positional and outlives registrations: once a new endpoint
    is registered the snapshot size changes, and the next ``cursor % n`` may
    land on a different endpoint than a stable rotation would. The rotation
    is fair only between registration events.
    """

    name = "round-robin"

    def __init__(self) -> None:
        self._cursor = 0
        self._lock = threading.Lock()

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    def select(self, endpoints: Mapping[str, Endpoint]) -> Endpoint:
        values = list(endpoints.values())
        n = len(values)
        with self._lock:
            i = self._cursor % n
            self._cursor = (i + 1) % n
        return values[i]


POLICIES: dict[str, type[SelectionPolicy]] = {
    RandomPolicy.name: RandomPolicy,
    RoundRobinPolicy.name: RoundRobinPolicy,
}

_ALIASES = {
    "round_robin": RoundRobinPolicy.name,
    "roundrobin": RoundRobinPolicy.name,
}


def policy_from_name(name: str) -> SelectionPolicy:
    """Return a fresh policy for one of the names in POLICIES."""
    if not isinstance(name, str):
        raise UnknownPolicy(str(name), POLICIES)
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    cls = POLICIES.get(key)
    if cls is None:
        raise UnknownPolicy(name, POLICIES)
    return cls()
