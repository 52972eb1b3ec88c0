"""Error types for the balancer registry.

All errors inherit from BalancerError so callers can catch them together,
and from the closest builtin where one applies.
"""

from __future__ import annotations

from typing import Iterable


class BalancerError(Exception):
    """Base class for all balancer errors."""


class InvalidEndpoint(BalancerError, ValueError):
    """Raised when an endpoint is built from a null or empty address."""

    def __init__(self, message: str = "Address cannot be null or empty.") -> None:
        super().__init__(message)


class NullEndpoint(BalancerError, ValueError):
    """Raised when None is passed to Registry.register()."""

    def __init__(self) -> None:
        super().__init__("Endpoint cannot be null.")


class CapacityExceeded(BalancerError):
    """Raised when the registry already holds its maximum number of endpoints."""

    def __init__(self, capacity: int) -> None:
        self.capacity = int(capacity)
        super().__init__(f"Maximum capacity of backend endpoints reached ({self.capacity}).")


class DuplicateAddress(BalancerError):
    """Raised when an endpoint with the same address is already registered."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Backend endpoint with address {address} already exists.")


class EmptyRegistry(BalancerError, LookupError):
    """Raised when select() is called before any endpoint is registered."""

    def __init__(self) -> None:
        super().__init__("No backend endpoints available.")


class UnknownPolicy(BalancerError, ValueError):
    """Raised when a selection policy name is not recognized."""

    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = sorted(known)
        msg = f"unknown selection policy: {name!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)
