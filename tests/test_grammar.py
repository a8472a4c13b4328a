"""test_grammar.py: tests for address segmentation and host classification."""
import ipaddress
from typing import Optional

import pytest

from multiserver import (
    IpHost,
    IpInvalid,
    NetworkHost,
    NoAddressString,
    ParseFailure,
    UrlInvalid,
)
from multiserver import _grammar, _host
from multiserver._grammar import Segments, recognize

KEY: str = "HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4="


@pytest.mark.parametrize("host, kind", [
    ("192.168.178.17", _grammar.IPV4),
    ("999.1.1.1", _grammar.IPV4),
    ("1200:0000:AB00:1234:0000:2552:7777:1313", _grammar.IPV6),
    ("fe80::1", _grammar.IPV6),
    ("::", _grammar.IPV6),
    ("host.com", _grammar.DOMAIN),
    ("1.2.3.4.5", _grammar.DOMAIN),
    ("localhost", _grammar.DOMAIN),
])
def test_recognize_host_shapes(host: str, kind: str) -> None:
    """Verifies each host shape is tagged and the port splits off last."""
    segments = recognize(f"net:{host}:8008~shs:{KEY}")

    assert segments == Segments(host, kind, "8008", "shs", KEY)


def test_key_payload_runs_to_end() -> None:
    """Trailing text is kept in the payload for the decoder to reject."""
    segments = recognize(f"net:host.com:1~shs:{KEY}~extra")
    assert segments.key == f"{KEY}~extra"


@pytest.mark.parametrize("text", [
    "",
    "net:",
    f"net::8008~shs:{KEY}",
    f"net:host com:8008~shs:{KEY}",
    f"net:host.com:8008~:{KEY}",
    "net:host.com:8008~shs:",
    f"net:host.com:-1~shs:{KEY}",
    f"net:1:2:3:4:5:6:7:8:9:8008~shs:{KEY}",
    f"NET:host.com:8008~shs:{KEY}",
])
def test_recognize_failures(text: str) -> None:
    """Verifies text of the wrong shape fails as a whole."""
    with pytest.raises(ParseFailure):
        recognize(text)


def test_classify_ipv4() -> None:
    """Verifies dotted quads become IPv4 endpoints."""
    endpoint = _host.classify("10.1.2.3", _grammar.IPV4)
    assert endpoint == IpHost(ipaddress.IPv4Address("10.1.2.3"))


def test_ip_shape_does_not_fall_back_to_domain() -> None:
    """An IP shaped host that fails to parse is not retried as a name."""
    with pytest.raises(IpInvalid):
        _host.classify("256.0.0.1", _grammar.IPV4)
    with pytest.raises(IpInvalid):
        _host.classify("1:2:3", _grammar.IPV6)


@pytest.mark.parametrize("name", [
    "host.com",
    "Host.COM",
    "a-b.example.org.",
    "_service.example",
    "x" * 63 + ".com",
    "bücher.de",
    "xn--bcher-kva.de",
])
def test_classify_domain(name: str) -> None:
    """Verifies valid host names become tcp NetworkHost endpoints."""
    endpoint = _host.classify(name, _grammar.DOMAIN)

    assert isinstance(endpoint, NetworkHost)
    assert endpoint.url.geturl() == f"tcp://{name}"
    assert endpoint.host == name.lower()


@pytest.mark.parametrize("name", [
    "user@host.com",
    "host.com/path",
    "host.com?query",
    "host.com#frag",
    "a..b",
    "bad-.com",
    "x" * 64 + ".com",
    ".".join(["abc"] * 64),
    "ho st.com",
    "ü" * 64 + ".de",
    "[host",
])
def test_classify_bad_domain(name: str) -> None:
    """Verifies text that is more or less than a host name is refused."""
    with pytest.raises(UrlInvalid):
        _host.classify(name, _grammar.DOMAIN)


@pytest.mark.parametrize("host, kind", [
    (None, _grammar.DOMAIN),
    ("", _grammar.IPV4),
    ("host.com", ""),
])
def test_classify_nothing(host: Optional[str], kind: str) -> None:
    """Verifies a missing or untagged host is reported as absent."""
    with pytest.raises(NoAddressString):
        _host.classify(host, kind)
