import base64
import hashlib
from abc import ABC, abstractmethod
from typing import Callable

ByteEncoder = Callable[[bytes], str]

_RFC4648_BASE32 = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'
_CROCKFORD_BASE32 = '0123456789ABCDEFGHJKMNPQRSTVWXYZ'
_to_crockford = str.maketrans(_RFC4648_BASE32, _CROCKFORD_BASE32)


def hex_encode(data: bytes) -> str:
    return data.hex()


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode('ascii').rstrip('=')


def base32_crockford_encode(data: bytes) -> str:
    # same 5-bit grouping as RFC 4648, only the alphabet differs
    encoded = base64.b32encode(data).decode('ascii').rstrip('=')
    return encoded.translate(_to_crockford)


class Encoder(ABC):

    @abstractmethod
    def encode(self, raw: str) -> str:
        pass


class PlainTextEncoder(Encoder):

    def encode(self, raw: str) -> str:
        return raw


class HashEncoder(Encoder):
    """One-way hash of the raw value.

    Args:
        algorithm: any name accepted by `hashlib.new`
        byte_encoder: renders the digest as text
    """

    def __init__(self,
                 algorithm: str = 'sha256',
                 byte_encoder: ByteEncoder = hex_encode):
        # fail at configuration time rather than on first use
        hashlib.new(algorithm)
        self._algorithm = algorithm
        self._byte_encoder = byte_encoder

    def encode(self, raw: str) -> str:
        digest = hashlib.new(self._algorithm, raw.encode('utf-8', 'surrogateescape')).digest()
        return self._byte_encoder(digest)
