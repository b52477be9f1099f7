from .builder import ComponentEntry, DeviceIdBuilder, OperatingSystem, detect_os
from .component import CallableComponent, Component, EncodedValue, StaticComponent
from .encoders import (Encoder, HashEncoder, PlainTextEncoder, base32_crockford_encode,
                       base64_encode, base64url_encode, hex_encode)
from .executor import CommandExecutionError, CommandExecutor
from .formatters import (Formatter, HashFormatter, JsonFormatter, StringFormatter,
                         XmlFormatter, default_formatter)
from .manager import DeviceIdManager

__all__ = [
    'CallableComponent',
    'CommandExecutionError',
    'CommandExecutor',
    'Component',
    'ComponentEntry',
    'DeviceIdBuilder',
    'DeviceIdManager',
    'EncodedValue',
    'Encoder',
    'Formatter',
    'HashEncoder',
    'HashFormatter',
    'JsonFormatter',
    'OperatingSystem',
    'PlainTextEncoder',
    'StaticComponent',
    'StringFormatter',
    'XmlFormatter',
    'base32_crockford_encode',
    'base64_encode',
    'base64url_encode',
    'default_formatter',
    'detect_os',
    'hex_encode',
]
