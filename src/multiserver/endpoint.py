"""endpoint.py: where a node can be reached."""
import ipaddress
import urllib.parse
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NetworkHost:
    """A node reached through a domain name.

    The name is kept as the parsed ``tcp://`` URL it was validated as.
    """
    url: urllib.parse.SplitResult

    @property
    def host(self) -> str:
        return self.url.hostname or ""


@dataclass(frozen=True)
class IpHost:
    """A node reached through a literal IPv4 or IPv6 address."""
    ip: Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

    @property
    def is_ipv4(self) -> bool:
        return self.ip.version == 4

    @property
    def is_ipv6(self) -> bool:
        return self.ip.version == 6


@dataclass(frozen=True)
class LocalSocketPath:
    """A node reached through a local socket file.

    Reserved for a ``unix:`` transport; no address form produces it yet.
    """
    path: str


Endpoint = Union[NetworkHost, IpHost, LocalSocketPath]
