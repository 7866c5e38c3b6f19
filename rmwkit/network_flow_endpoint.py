"""Network flow endpoints of publishers and subscriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from rmwkit.errors import BadAllocError, InvalidArgumentError, RmwError

INET_ADDRSTRLEN = 48
"""Room for an internet address string, counting its terminating null."""


class TransportProtocol(enum.IntEnum):
    """Transport protocol of a network flow."""

    UNKNOWN = 0
    UDP = 1
    TCP = 2


class InternetProtocol(enum.IntEnum):
    """Internet protocol of a network flow."""

    UNKNOWN = 0
    IPV4 = 1
    IPV6 = 2


_TRANSPORT_NAMES = {
    TransportProtocol.UNKNOWN: "Unknown",
    TransportProtocol.UDP: "UDP",
    TransportProtocol.TCP: "TCP",
}

_INTERNET_NAMES = {
    InternetProtocol.UNKNOWN: "Unknown",
    InternetProtocol.IPV4: "IPv4",
    InternetProtocol.IPV6: "IPv6",
}


def transport_protocol_string(transport_protocol: Union[TransportProtocol, int]) -> str:
    """Return the name of a transport protocol; unknown values give ``"Unknown"``."""
    return _TRANSPORT_NAMES.get(transport_protocol, "Unknown")


def internet_protocol_string(internet_protocol: Union[InternetProtocol, int]) -> str:
    """Return the name of an internet protocol; unknown values give ``"Unknown"``."""
    return _INTERNET_NAMES.get(internet_protocol, "Unknown")


@dataclass
class NetworkFlowEndpoint:
    """One endpoint of a network flow; a default instance is all zero."""

    transport_protocol: TransportProtocol = TransportProtocol.UNKNOWN
    internet_protocol: InternetProtocol = InternetProtocol.UNKNOWN
    transport_port: int = 0
    flow_label: int = 0
    dscp: int = 0
    internet_address: str = ""

    def set_internet_address(self, internet_address: str) -> None:
        """Store an internet address, which must be shorter than ``INET_ADDRSTRLEN``."""
        if internet_address is None:
            raise InvalidArgumentError("internet_address is null")
        if not isinstance(internet_address, str):
            raise InvalidArgumentError("internet_address must be a string")
        if len(internet_address.encode("utf-8")) >= INET_ADDRSTRLEN:
            raise InvalidArgumentError("size is not less than RMW_INET_ADDRSTRLEN")
        self.internet_address = internet_address


@dataclass
class NetworkFlowEndpointArray:
    """A fixed number of network flow endpoints; a default instance is zero."""

    size: int = 0
    network_flow_endpoint: Optional[list[NetworkFlowEndpoint]] = None
    initialized: bool = field(default=False)

    def check_zero(self) -> None:
        """Raise ``RmwError`` unless the array holds nothing and was never set up."""
        if self.size != 0 or self.network_flow_endpoint is not None or self.initialized:
            raise RmwError("network_flow_endpoint_array is not zeroed")

    def init(self, size: int) -> None:
        """Set the array up with ``size`` zero endpoints."""
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise InvalidArgumentError("size must be a non-negative integer")
        try:
            slots = [None] * size
        except (MemoryError, OverflowError) as exc:
            raise BadAllocError(
                "failed to allocate memory for network_flow_endpoint_array"
            ) from exc
        self.network_flow_endpoint = [NetworkFlowEndpoint() for _ in slots]
        self.size = size
        self.initialized = True

    def fini(self) -> None:
        """Release the endpoints and return the array to its zero state."""
        if not self.initialized:
            raise InvalidArgumentError("network_flow_endpoint_array->allocator is null")
        self.network_flow_endpoint = None
        self.size = 0
        self.initialized = False

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[NetworkFlowEndpoint]:
        return iter(self.network_flow_endpoint or ())