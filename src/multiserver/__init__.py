"""Parsing of multiserver addresses.

A multiserver address tells a peer how to reach a node and which key the
node will prove it holds, e.g.::

    net:192.168.178.17:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=

Logging goes through loguru and is off by default; call
``logger.enable("multiserver")`` to see it.
"""
from loguru import logger

from .address import MultiserverAddress, parse
from .endpoint import Endpoint, IpHost, LocalSocketPath, NetworkHost
from .errors import (
    AddressError,
    IpInvalid,
    NoAddressString,
    NoPortString,
    NoPubKeyString,
    ParseFailure,
    PortNotNumeric,
    PubKeyNotBase64,
    PubKeyWrongLength,
    UrlInvalid,
)
from .key import PublicKey

logger.disable("multiserver")

__all__=[
    'AddressError',
    'Endpoint',
    'IpHost',
    'IpInvalid',
    'LocalSocketPath',
    'MultiserverAddress',
    'NetworkHost',
    'NoAddressString',
    'NoPortString',
    'NoPubKeyString',
    'ParseFailure',
    'PortNotNumeric',
    'PubKeyNotBase64',
    'PubKeyWrongLength',
    'PublicKey',
    'UrlInvalid',
    'parse',
]
