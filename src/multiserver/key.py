"""key.py: ed25519 public keys carried in multiserver addresses."""
import base64
import binascii
from typing import Any, Tuple

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from loguru import logger

from .errors import PubKeyNotBase64, PubKeyWrongLength


class PublicKey:
    """
    An ed25519 public key identifying a node.

    Keys are immutable and compare by their raw bytes. The legacy textual
    form, ``@<base64>.ed25519``, is what peers print and exchange.

    Attributes:
        data (bytes): the raw 32 key bytes.
    """
    __slots__ = ('data',)
    LENGTH: int = 32
    SUFFIX: str = ".ed25519"

    data: bytes

    def __init__(self, data: bytes) -> None:
        if len(data) != PublicKey.LENGTH:
            logger.debug("pub key is {} bytes long", len(data))
            raise PubKeyWrongLength()
        object.__setattr__(self, 'data', bytes(data))


    @classmethod
    def from_ed25519(cls, data: bytes) -> "PublicKey":
        """Wraps raw ed25519 key bytes."""
        return cls(data)


    @classmethod
    def from_base64(cls, payload: str) -> "PublicKey":
        """
        Decodes the key payload of an address.

        Args:
            payload (str): standard base64 text.

        Returns:
            PublicKey: the decoded key.

        Raises:
            PubKeyNotBase64: `payload` is not valid base64.
            PubKeyWrongLength: `payload` does not decode to 32 bytes.
        """
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as err:
            logger.debug("pub key {!r} is not base64: {}", payload[:80], err)
            raise PubKeyNotBase64() from err

        return cls(raw)


    @classmethod
    def from_legacy_string(cls, text: str) -> "PublicKey":
        """Parses the ``@<base64>.ed25519`` form."""
        if not (text.startswith("@") and text.endswith(cls.SUFFIX)):
            raise PubKeyNotBase64("Key is not in @<base64>.ed25519 form")
        return cls.from_base64(text[1:-len(cls.SUFFIX)])


    def to_legacy_string(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"@{encoded}{PublicKey.SUFFIX}"


    def to_cryptography(self) -> Ed25519PublicKey:
        """Returns the key as a `cryptography` object for signature checks."""
        return Ed25519PublicKey.from_public_bytes(self.data)


    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


    def __reduce__(self) -> Tuple[type, Tuple[bytes]]:
        return (PublicKey, (self.data,))


    def __bytes__(self) -> bytes:
        return self.data


    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PublicKey):
            return False
        return self.data == other.data


    def __hash__(self) -> int:
        return hash(self.data)


    def __repr__(self) -> str:
        return f"PublicKey({self.to_legacy_string()!r})"
