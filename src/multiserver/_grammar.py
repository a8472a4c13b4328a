"""_grammar.py: splits a multiserver address into its raw segments."""
import re
from typing import NamedTuple, Optional

from loguru import logger

from .errors import ParseFailure

IPV4 = "ipv4"
IPV6 = "ipv6"
DOMAIN = "domain"

# Host alternatives are tried in order, so a dotted quad is always claimed
# by the ipv4 branch and anything with two or more colons made of hex
# groups by the ipv6 branch. The port is whatever follows the last colon
# before "~".
_ADDRESS = re.compile(
    r"net:"
    r"(?:"
    r"(?P<ipv4>\d{1,3}(?:\.\d{1,3}){3})"
    r"|(?P<ipv6>[0-9A-Fa-f]{0,4}(?::[0-9A-Fa-f]{0,4}){2,7})"
    r"|(?P<domain>[^:~\s]+)"
    r")"
    r":(?P<port>[0-9]+)"
    r"~(?P<scheme>\w+)"
    r":(?P<key>.+)",
    re.ASCII,
)


class Segments(NamedTuple):
    """Uninterpreted pieces of a recognized address.

    Attributes:
        host: the host text exactly as it appeared.
        host_kind: which host shape matched (``ipv4``, ``ipv6`` or ``domain``).
        port: the port digits.
        scheme: the key scheme name, e.g. ``shs``.
        key: the key payload, not yet decoded. It runs to the end of the
            input, so trailing garbage ends up here and fails decoding.
    """
    host: Optional[str]
    host_kind: str
    port: Optional[str]
    scheme: str
    key: Optional[str]


def recognize(text: str) -> Segments:
    """Matches the whole of `text` against the address grammar.

    Args:
        text: candidate multiserver address.

    Returns:
        Segments: the named segments of the address.

    Raises:
        ParseFailure: `text` does not have the shape of an address.
    """
    match = _ADDRESS.fullmatch(text)
    if match is None:
        logger.trace("no grammar match for {!r}", text[:80])
        raise ParseFailure()

    host_kind = _host_kind(match)
    return Segments(
        host=match.group(host_kind) if host_kind else None,
        host_kind=host_kind,
        port=match.group("port"),
        scheme=match.group("scheme"),
        key=match.group("key"),
    )


def _host_kind(match: "re.Match[str]") -> str:
    for kind in (IPV4, IPV6, DOMAIN):
        if match.group(kind) is not None:
            return kind
    return ""
