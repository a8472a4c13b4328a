"""errors.py: exceptions raised while parsing multiserver addresses."""
from typing import Optional


class AddressError(ValueError):
    """Base class for every multiserver address parsing failure.

    Each subclass names the stage that rejected the input. Where a lower
    level error caused the rejection it is chained as ``__cause__``.
    """
    message: str = "Invalid multiserver address"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class ParseFailure(AddressError):
    message = "Could not parse address"


class IpInvalid(AddressError):
    message = "Could not parse ip"


class UrlInvalid(AddressError):
    message = "Could not parse url"


class PortNotNumeric(AddressError):
    message = "Port was not numeric"


class NoAddressString(AddressError):
    message = "Could not find network address in string"


class NoPubKeyString(AddressError):
    message = "Could not find pub key in address string"


class NoPortString(AddressError):
    message = "Could not find port in address string"


class PubKeyNotBase64(AddressError):
    message = "Could not decode pubkey as base64"


class PubKeyWrongLength(AddressError):
    message = "Decoded pubkey is not 32 bytes long"


__all__ = [
    'AddressError',
    'IpInvalid',
    'NoAddressString',
    'NoPortString',
    'NoPubKeyString',
    'ParseFailure',
    'PortNotNumeric',
    'PubKeyNotBase64',
    'PubKeyWrongLength',
    'UrlInvalid',
]
