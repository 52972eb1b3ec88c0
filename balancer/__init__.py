"""balancer — thread-safe endpoint registry with pluggable selection policies."""

from . import address
from . import config
from . import errors
from .endpoint import Endpoint
from .errors import (
    BalancerError,
    CapacityExceeded,
    DuplicateAddress,
    EmptyRegistry,
    InvalidEndpoint,
    NullEndpoint,
    UnknownPolicy,
)
from .policy import POLICIES, RandomPolicy, RoundRobinPolicy, SelectionPolicy, policy_from_name
from .registry import MAX_INSTANCES, Registry

__all__ = [
    "address",
    "config",
    "errors",
    "Endpoint",
    "Registry",
    "MAX_INSTANCES",
    "SelectionPolicy",
    "RandomPolicy",
    "RoundRobinPolicy",
    "POLICIES",
    "policy_from_name",
    "BalancerError",
    "InvalidEndpoint",
    "NullEndpoint",
    "CapacityExceeded",
    "DuplicateAddress",
    "EmptyRegistry",
    "UnknownPolicy",
]
