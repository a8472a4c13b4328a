"""_host.py: turns the host segment of an address into an endpoint."""
import ipaddress
import re
import urllib.parse
from typing import Optional

from loguru import logger

from . import _grammar
from .endpoint import Endpoint, IpHost, NetworkHost
from .errors import IpInvalid, NoAddressString, UrlInvalid

TCP_SCHEME = "tcp://"
_MAX_HOSTNAME = 253
_LABEL = re.compile(r"[A-Za-z0-9_](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?", re.ASCII)


def classify(host: Optional[str], kind: str) -> Endpoint:
    """Builds the endpoint for a host segment.

    The grammar already decided the shape of the host, so an IP shaped
    segment that does not parse is an error rather than a domain.

    Args:
        host: host segment from the grammar.
        kind: host shape reported by the grammar.

    Returns:
        Endpoint: an `IpHost` for address literals, a `NetworkHost` otherwise.

    Raises:
        IpInvalid: an IP shaped segment is not a valid address.
        UrlInvalid: a domain segment is not a valid host name.
        NoAddressString: the segment is missing or of no known shape.
    """
    if not host:
        raise NoAddressString()
    if kind == _grammar.IPV4 or kind == _grammar.IPV6:
        return _ip_host(host)
    if kind == _grammar.DOMAIN:
        return _network_host(host)
    raise NoAddressString()


def _ip_host(host: str) -> IpHost:
    try:
        ip = ipaddress.ip_address(host)
    except ValueError as err:
        logger.debug("invalid ip {!r}: {}", host[:80], err)
        raise IpInvalid() from err
    return IpHost(ip)


def _network_host(host: str) -> NetworkHost:
    try:
        url = urllib.parse.urlsplit(f"{TCP_SCHEME}{host}", allow_fragments=False)
        port = url.port
    except ValueError as err:
        logger.debug("invalid url for host {!r}: {}", host[:80], err)
        raise UrlInvalid() from err

    if (url.username is not None or port is not None or url.path
            or url.query or url.hostname is None):
        logger.debug("host {!r} is more than a host name", host[:80])
        raise UrlInvalid()
    if not _valid_hostname(url.hostname):
        logger.debug("host {!r} is not a valid host name", host[:80])
        raise UrlInvalid()
    return NetworkHost(url)


def _valid_hostname(name: str) -> bool:
    if name.endswith("."):
        name = name[:-1]
    if not name:
        return False
    try:
        name = name.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    if len(name) > _MAX_HOSTNAME:
        return False
    return all(_LABEL.fullmatch(label) for label in name.split("."))
