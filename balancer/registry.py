from __future__ import annotations

"""Thread-safe registry of backend endpoints."""

import logging
import threading
from types import MappingProxyType
from typing import Mapping

from balancer.endpoint import Endpoint
from balancer.errors import CapacityExceeded, DuplicateAddress, EmptyRegistry, NullEndpoint
from balancer.policy import SelectionPolicy

logger = logging.getLogger("balancer.registry")

MAX_INSTANCES = 10


class Registry:
    """Holds up to ``capacity`` endpoints with unique addresses.

    Registrations are serialized by a lock that covers the capacity check,
    the duplicate check and the insert. Each insert publishes a new
    read-only snapshot by swapping one reference, so select() never takes
    the lock and never observes a half-written entry.
    """

    def __init__(self, policy: SelectionPolicy, capacity: int = MAX_INSTANCES):
        if not isinstance(policy, SelectionPolicy):
            raise TypeError(f"policy must be a SelectionPolicy, got {type(policy).__name__}")
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._policy = policy
        self._capacity = capacity
        self._lock = threading.Lock()
        self._entries: dict[str, Endpoint] = {}
        self._snapshot: Mapping[str, Endpoint] = MappingProxyType({})

    @property
    def policy(self) -> SelectionPolicy:
        return self._policy

    @property
    def capacity(self) -> int:
        return self._capacity

    def register(self, endpoint: Endpoint) -> bool:
        """Add an endpoint if its address is new and there is room.

        Raises NullEndpoint, CapacityExceeded or DuplicateAddress.
        """
        if endpoint is None:
            raise NullEndpoint()
        if not isinstance(endpoint, Endpoint):
            raise TypeError(f"expected Endpoint, got {type(endpoint).__name__}")

        address = endpoint.address
        with self._lock:
            if len(self._entries) >= self._capacity:
                logger.debug("rejected %s: registry full (%d)", address, self._capacity)
                raise CapacityExceeded(self._capacity)
            if address in self._entries:
                logger.debug("rejected %s: already registered", address)
                raise DuplicateAddress(address)
            self._entries[address] = endpoint
            self._snapshot = MappingProxyType(dict(self._entries))
            size = len(self._entries)

        logger.debug("registered %s (%d/%d)", address, size, self._capacity)
        return True

    def select(self) -> Endpoint:
        """Return one endpoint chosen by the configured policy.

        Raises EmptyRegistry if nothing is registered.
        """
        snapshot = self._snapshot
        if not snapshot:
            raise EmptyRegistry()
        return self._policy.select(snapshot)

    get = select

    def snapshot(self) -> Mapping[str, Endpoint]:
        """Read-only view of the entries at this instant, by address."""
        return self._snapshot

    def endpoints(self) -> tuple[Endpoint, ...]:
        """Registered endpoints in registration order."""
        return tuple(self._snapshot.values())

    def is_full(self) -> bool:
        return len(self._snapshot) >= self._capacity

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Endpoint):
            item = item.address
        return item in self._snapshot

    def __repr__(self) -> str:
        return (
            f"Registry(policy={type(self._policy).__name__}, "
            f"size={len(self)}, capacity={self._capacity})"
        )
