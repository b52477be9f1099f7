from .blockdevice import BlockDevice, RootDriveSerialNumberComponent
from .command import CommandComponent
from .docker import DockerContainerIdComponent
from .files import FileContentsComponent, FileTokenComponent
from .network import (AdapterCandidate, MacAddressComponent, PsutilAdapterSource,
                      select_adapters)
from .system import MachineNameComponent, OsVersionComponent, UserNameComponent

__all__ = [
    'AdapterCandidate',
    'BlockDevice',
    'CommandComponent',
    'DockerContainerIdComponent',
    'FileContentsComponent',
    'FileTokenComponent',
    'MacAddressComponent',
    'MachineNameComponent',
    'OsVersionComponent',
    'PsutilAdapterSource',
    'RootDriveSerialNumberComponent',
    'UserNameComponent',
    'select_adapters',
]
