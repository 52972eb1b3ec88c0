from __future__ import annotations

"""Parse endpoint addresses into their transport parts.

Recognized forms:
    <scheme>://<host>:<port>/<path>   e.g. http://instance1:8080/api
    unix://<path>                     Unix domain socket
    <host>:<port>                     bare host, no scheme

Parsing is informational only: nothing here opens a connection.
"""

from dataclasses import dataclass

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}


@dataclass(frozen=True)
class ParsedAddress:
    raw: str
    scheme: str
    host: str | None = None
    port: int | None = None
    path: str | None = None


def scheme(address: str) -> str:
    """Extract the scheme from an address, or "" when it has none."""
    idx = address.find("://")
    return address[:idx].lower() if idx >= 0 else ""


def parse_address(address: str) -> ParsedAddress:
    """Parse an endpoint address into a normalized structure."""
    if not address:
        raise ValueError("address is required")

    s = scheme(address)
    rest = address[len(s) + 3:] if s else address

    if s == "unix":
        if not rest:
            raise ValueError(f"invalid unix:// address: {address!r}")
        return ParsedAddress(raw=address, scheme="unix", path=rest)

    if "/" in rest:
        hostport, path = rest.split("/", 1)
        path = "/" + path
    else:
        hostport, path = rest, None

    host, port = _split_host_port(hostport, default_port=DEFAULT_PORTS.get(s))
    if not host:
        raise ValueError(f"address has no host: {address!r}")
    return ParsedAddress(raw=address, scheme=s, host=host, port=port, path=path)


def _split_host_port(addr: str, default_port: int | None) -> tuple[str, int | None]:
    if ":" not in addr:
        return addr, default_port

    # [::1]:8080
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            raise ValueError(f"unterminated IPv6 host: {addr!r}")
        host, tail = addr[1:end], addr[end + 1:]
        if not tail:
            return host, default_port
        if not tail.startswith(":"):
            raise ValueError(f"invalid host:port: {addr!r}")
        return host, _parse_port(tail[1:], addr, default_port)

    host, _, port = addr.rpartition(":")
    return host, _parse_port(port, addr, default_port)


def _parse_port(port: str, addr: str, default_port: int | None) -> int | None:
    if not port:
        return default_port
    try:
        value = int(port)
    except ValueError as exc:
        raise ValueError(f"invalid port in {addr!r}") from exc
    if not 0 <= value <= 65535:
        raise ValueError(f"port out of range in {addr!r}")
    return value
