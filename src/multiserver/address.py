# address.py

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from . import _grammar, _host
from .endpoint import Endpoint
from .errors import AddressError, NoPortString, NoPubKeyString, PortNotNumeric
from .key import PublicKey

MAX_PORT: int = 65535


@dataclass(frozen=True)
class MultiserverAddress:
    """
    Represents how to reach a peer: its network endpoint plus its public key.

    Instances are built by `parse` (or `MultiserverAddress.from_string`)
    from the textual form::

        net:<host>:<port>~shs:<base64 ed25519 key>

    where host is an IPv4 literal, an IPv6 literal or a domain name.

    Attributes:
        public_key (Optional[PublicKey]): the node's ed25519 key.
        port (int): TCP port, within 0-65535.
        endpoint (Endpoint): an `IpHost`, `NetworkHost` or `LocalSocketPath`.

    Instances are immutable, hashable and compare by value.
    """
    public_key: Optional[PublicKey]
    port: int
    endpoint: Endpoint


    @classmethod
    def from_string(cls, text: str) -> "MultiserverAddress":
        """Same as `parse`."""
        return parse(text)


def parse(text: str) -> "MultiserverAddress":
    """
    Parses a multiserver address.

    Stages run in order and the first failure is raised: grammar match,
    key decoding, host classification, then port conversion.

    Args:
        text (str): the address string.

    Returns:
        MultiserverAddress: the validated address.

    Raises:
        AddressError: a subclass naming why `text` was rejected.
    """
    logger.trace("parsing {!r}", text[:80])
    try:
        segments = _grammar.recognize(text)
        if not segments.key:
            raise NoPubKeyString()
        if not segments.port:
            raise NoPortString()

        public_key = PublicKey.from_base64(segments.key)
        endpoint = _host.classify(segments.host, segments.host_kind)
        port = _port(segments.port)
    except AddressError as err:
        logger.debug("rejected {!r}: {}", text[:80], type(err).__name__)
        raise

    return MultiserverAddress(
        public_key=public_key,
        port=port,
        endpoint=endpoint,
    )


def _port(digits: str) -> int:
    """Converts port digits, rejecting anything outside an unsigned 16 bit int."""
    if not (digits.isascii() and digits.isdigit()):
        raise PortNotNumeric()
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_PORT)):
        raise PortNotNumeric("Port is out of range")
    port = int(digits)
    if port > MAX_PORT:
        raise PortNotNumeric(f"Port {port} is out of range")
    return port
