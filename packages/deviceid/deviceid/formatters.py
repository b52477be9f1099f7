import hashlib
import json
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Sequence

from .component import EncodedValue
from .encoders import ByteEncoder, base32_crockford_encode


class Formatter(ABC):
    """Combines the encoded component values into one identifier.

    `format` must be a pure function of `values`: the same values in the same
    order always give the same string.
    """

    @abstractmethod
    def format(self, values: Sequence[EncodedValue]) -> str:
        pass


class StringFormatter(Formatter):
    """`name=value` pairs joined by `separator`, in registration order."""

    def __init__(self, separator: str = '|'):
        self._separator = separator

    def format(self, values: Sequence[EncodedValue]) -> str:
        return self._separator.join(f'{v.name}={v.value}' for v in values)


class HashFormatter(StringFormatter):
    """Hash of the `StringFormatter` output, a fixed length opaque token."""

    def __init__(self,
                 separator: str = '|',
                 algorithm: str = 'sha256',
                 byte_encoder: ByteEncoder = base32_crockford_encode):
        super().__init__(separator)
        hashlib.new(algorithm)
        self._algorithm = algorithm
        self._byte_encoder = byte_encoder

    def format(self, values: Sequence[EncodedValue]) -> str:
        text = super().format(values)
        digest = hashlib.new(self._algorithm, text.encode('utf-8', 'surrogateescape')).digest()
        return self._byte_encoder(digest)


class JsonFormatter(Formatter):

    def format(self, values: Sequence[EncodedValue]) -> str:
        components = [{'name': v.name, 'value': v.value} for v in values]
        return json.dumps({'components': components},
                          ensure_ascii=False,
                          separators=(',', ':'))


class XmlFormatter(Formatter):

    def format(self, values: Sequence[EncodedValue]) -> str:
        root = ET.Element('DeviceId')
        for v in values:
            ET.SubElement(root, 'Component', {'Name': v.name, 'Value': v.value})
        return ET.tostring(root, encoding='unicode', short_empty_elements=True)


def default_formatter() -> Formatter:
    return HashFormatter()
