from __future__ import annotations

"""Command-line front end: load a pool and print selections."""

import json
import logging
import sys
from typing import Any, Sequence

from balancer.config import PoolConfig, build_registry, load_config

logger = logging.getLogger("balancer.cli")

DEFAULT_COUNT = 1


def parse_args(argv: Sequence[str]) -> dict[str, Any]:
    out: dict[str, Any] = {
        "config": None,
        "policy": None,
        "capacity": None,
        "count": DEFAULT_COUNT,
        "endpoints": [],
        "verbose": False,
    }

    config_set = False
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--policy" and i + 1 < len(argv):
            out["policy"] = argv[i + 1]
            i += 2
            continue
        if token == "--capacity" and i + 1 < len(argv):
            out["capacity"] = _positive_int(argv[i + 1], out["capacity"])
            i += 2
            continue
        if token == "--count" and i + 1 < len(argv):
            out["count"] = _positive_int(argv[i + 1], out["count"])
            i += 2
            continue
        if token == "--endpoint" and i + 1 < len(argv):
            out["endpoints"].append(argv[i + 1])
            i += 2
            continue
        if token == "--verbose":
            out["verbose"] = True
            i += 1
            continue

        if not token.startswith("--") and not config_set:
            out["config"] = token
            config_set = True

        i += 1

    return out


def _positive_int(raw: str, fallback: int | None) -> int | None:
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def _build_config(args: dict[str, Any]) -> PoolConfig:
    config = load_config(args["config"]) if args["config"] else PoolConfig()
    if args["policy"] is not None:
        config.policy = args["policy"]
    if args["capacity"] is not None:
        config.capacity = args["capacity"]
    config.endpoints = list(config.endpoints) + list(args["endpoints"])
    return config


def run(argv: Sequence[str] | None = None) -> dict[str, Any]:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    if args["verbose"]:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    config = _build_config(args)
    registry = build_registry(config)
    logger.debug("selecting %d time(s) from %r", args["count"], registry)

    selected = [registry.select().address for _ in range(int(args["count"]))]
    return {
        "policy": registry.policy.name,
        "capacity": registry.capacity,
        "registered": [ep.address for ep in registry.endpoints()],
        "selected": selected,
    }


def main() -> None:
    try:
        result = run()
    except Exception as exc:  # pragma: no cover - CLI guard
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc

    print(json.dumps(result, separators=(",", ":")))


if __name__ == "__main__":
    main()
