from __future__ import annotations

"""Load endpoint pools from YAML files.

A pool file is a YAML mapping:

    policy: round-robin
    capacity: 10
    endpoints:
      - http://instance1
      - http://instance2

Every key is optional.
"""

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

import yaml

from balancer.endpoint import Endpoint
from balancer.policy import policy_from_name
from balancer.registry import MAX_INSTANCES, Registry

logger = logging.getLogger("balancer.config")

DEFAULT_POLICY = os.environ.get("BALANCER_POLICY", "random")


@dataclass
class PoolConfig:
    """Parsed pool file."""

    policy: str = DEFAULT_POLICY
    capacity: int = MAX_INSTANCES
    endpoints: list[str] = field(default_factory=list)


def load_config(path: str | Path) -> PoolConfig:
    """Parse a pool file.

    Raises FileNotFoundError if the file doesn't exist.
    Raises ValueError if the content is invalid, including malformed YAML.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    config = parse_config(text, source=str(path))
    logger.debug("loaded %s: policy=%s capacity=%d endpoints=%d",
                 path, config.policy, config.capacity, len(config.endpoints))
    return config


def parse_config(text: str, source: str = "<string>") -> PoolConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"{source}: invalid YAML: {exc}") from exc
    if data is None:
        return PoolConfig()
    if not isinstance(data, dict):
        raise ValueError(f"{source}: pool file is not a YAML mapping")

    policy = data.get("policy", DEFAULT_POLICY)
    if not isinstance(policy, str) or not policy.strip():
        raise ValueError(f"{source}: policy must be a non-empty string")

    capacity = data.get("capacity", MAX_INSTANCES)
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ValueError(f"{source}: capacity must be a positive integer, got {capacity!r}")

    raw_endpoints = data.get("endpoints")
    if raw_endpoints is None:
        raw_endpoints = []
    if not isinstance(raw_endpoints, list):
        raise ValueError(f"{source}: endpoints must be a list")
    endpoints: list[str] = []
    for item in raw_endpoints:
        if not isinstance(item, str) or not item:
            raise ValueError(f"{source}: endpoint addresses must be non-empty strings, got {item!r}")
        endpoints.append(item)

    return PoolConfig(policy=policy.strip(), capacity=capacity, endpoints=endpoints)


def build_registry(config: PoolConfig) -> Registry:
    """Create a registry for ``config`` and register its endpoints in order."""
    registry = Registry(policy_from_name(config.policy), capacity=config.capacity)
    for address in config.endpoints:
        registry.register(Endpoint(address))
    return registry
