from __future__ import annotations

"""Backend endpoint value type."""

from dataclasses import dataclass

from balancer.address import ParsedAddress, parse_address
from balancer.errors import InvalidEndpoint


@dataclass(frozen=True)
class Endpoint:
    """One backend, identified by its address.

    Two endpoints are equal, and hash the same, iff their addresses are equal.
    """

    address: str

    def __post_init__(self) -> None:
        if not isinstance(self.address, str) or not self.address:
            raise InvalidEndpoint()

    def __str__(self) -> str:
        return self.address

    @property
    def parsed(self) -> ParsedAddress:
        """Scheme, host, port and path of the address.

        Raises ValueError if the address is not in a recognized form.
        """
        return parse_address(self.address)
