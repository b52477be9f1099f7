from .base import PlatformBuilder
from .linux import LinuxBuilder
from .mac import MacBuilder
from .windows import WindowsBuilder

__all__ = [
    'LinuxBuilder',
    'MacBuilder',
    'PlatformBuilder',
    'WindowsBuilder',
]
