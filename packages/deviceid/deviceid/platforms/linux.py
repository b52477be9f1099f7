from ..components.blockdevice import RootDriveSerialNumberComponent
from ..components.docker import DockerContainerIdComponent
from ..components.files import FileContentsComponent
from ..encoders import HashEncoder
from .base import PlatformBuilder

MACHINE_ID_PATHS = ['/var/lib/dbus/machine-id', '/etc/machine-id']

# fields that change between reads of /proc/cpuinfo
_volatile_cpuinfo_prefixes = ('cpu MHz', 'bogomips', 'BogoMIPS')


class LinuxBuilder(PlatformBuilder):

    def add_machine_id(self) -> 'LinuxBuilder':
        return self.add_component('MachineID', FileContentsComponent(MACHINE_ID_PATHS))

    def add_product_uuid(self) -> 'LinuxBuilder':
        return self.add_component('ProductUUID',
                                  FileContentsComponent('/sys/class/dmi/id/product_uuid'))

    def add_cpu_info(self) -> 'LinuxBuilder':
        return self.add_component(
            'CPUInfo',
            FileContentsComponent('/proc/cpuinfo', skip_line_prefixes=_volatile_cpuinfo_prefixes),
            HashEncoder())

    def add_motherboard_serial_number(self) -> 'LinuxBuilder':
        return self.add_component('MotherboardSerialNumber',
                                  FileContentsComponent('/sys/class/dmi/id/board_serial'))

    def add_system_drive_serial_number(self) -> 'LinuxBuilder':
        return self.add_component('SystemDriveSerialNumber',
                                  RootDriveSerialNumberComponent(self.executor))

    def add_docker_container_id(self) -> 'LinuxBuilder':
        return self.add_component('DockerContainerId', DockerContainerIdComponent())
