import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..component import Component
from ..executor import CommandExecutionError, CommandExecutor

logger = logging.getLogger(__name__)

LSBLK_COMMAND = 'lsblk -f -J -o NAME,MOUNTPOINT'


@dataclass
class BlockDevice:
    name: Optional[str] = None
    mountpoint: Optional[str] = None
    children: List['BlockDevice'] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['BlockDevice']:
        '''Lenient conversion of one lsblk entry, None if it is not an object'''
        if not isinstance(data, dict):
            return None
        name = data.get('name')
        mountpoint = data.get('mountpoint')
        # newer lsblk reports "mountpoints": [...] instead
        if mountpoint is None and isinstance(data.get('mountpoints'), list):
            mountpoint = '/' if '/' in data['mountpoints'] else None
        children = data.get('children')
        if not isinstance(children, list):
            children = []
        return cls(
            name=name if isinstance(name, str) else None,
            mountpoint=mountpoint if isinstance(mountpoint, str) else None,
            children=[c for c in (cls.from_dict(x) for x in children) if c is not None],
        )

    def contains_mountpoint(self, mountpoint: str) -> bool:
        if self.mountpoint == mountpoint:
            return True
        return any(child.contains_mountpoint(mountpoint) for child in self.children)


def parse_lsblk_output(text: str) -> List[BlockDevice]:
    """
    Parse `lsblk -J` output leniently.

    Args:
        text: stdout of lsblk, may be empty or truncated

    Returns:
        top level block devices, [] when the output is not usable json
    """
    if not text:
        return []
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.debug(f'invalid lsblk json: {e}')
        return []
    if not isinstance(data, dict) or not isinstance(data.get('blockdevices'), list):
        return []
    devices = (BlockDevice.from_dict(x) for x in data['blockdevices'])
    return [d for d in devices if d is not None]


def find_root_device(devices: List[BlockDevice], mountpoint: str = '/') -> Optional[BlockDevice]:
    """
    Find the device mounted at `mountpoint`, depth first at any nesting level.

    Args:
        devices: top level devices from `parse_lsblk_output`
        mountpoint: mount point to look for

    Returns:
        the nested device itself (partition, lvm or crypt mapping), or None
    """
    for device in devices:
        if device.mountpoint == mountpoint:
            return device
        found = find_root_device(device.children, mountpoint)
        if found is not None:
            return found
    return None


def find_root_parent(devices: List[BlockDevice], mountpoint: str = '/') -> Optional[BlockDevice]:
    """
    Find the top level device (the disk) whose tree holds `mountpoint`.

    Args:
        devices: top level devices from `parse_lsblk_output`
        mountpoint: mount point to look for

    Returns:
        the disk entry to ask udev about, or None
    """
    for device in devices:
        if device.contains_mountpoint(mountpoint):
            return device
    return None


def parse_udev_serial(text: str) -> Optional[str]:
    for line in text.splitlines():
        # "E: ID_SERIAL=..." in full udevadm output
        _, sep, rest = line.partition('ID_SERIAL=')
        if sep:
            return rest.strip() or None
    return None


class RootDriveSerialNumberComponent(Component):
    """Serial number of the disk holding the root filesystem on linux."""

    def __init__(self, executor: CommandExecutor):
        self._executor = executor

    def produce(self) -> Optional[str]:
        try:
            devices = parse_lsblk_output(self._executor.execute(LSBLK_COMMAND))
            device = find_root_parent(devices)
            if device is None or not device.name:
                return None
            udev_info = self._executor.execute(
                f'udevadm info --query=all --name=/dev/{device.name} | grep ID_SERIAL=')
        except CommandExecutionError as e:
            logger.debug(f'root drive serial unavailable: {e}')
            return None
        return parse_udev_serial(udev_info)
