import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f'invalid {name}={value!r}, using {default}')
        return default


@dataclass
class Config:
    # timeout in seconds for each external command run by a component
    DEVICEID_COMMAND_TIMEOUT: int = field(
        default_factory=lambda: _int_env("DEVICEID_COMMAND_TIMEOUT", 10))
    # shell used for command components on linux and mac
    DEVICEID_SHELL: str = field(
        default_factory=lambda: os.getenv("DEVICEID_SHELL", "bash"))
    DEVICEID_SYSFS_NET_ROOT: str = field(
        default_factory=lambda: os.getenv("DEVICEID_SYSFS_NET_ROOT", "/sys/class/net"))
    DEVICEID_LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("DEVICEID_LOG_LEVEL", "WARNING"))


config = Config()
