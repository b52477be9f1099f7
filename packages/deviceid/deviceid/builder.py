import hashlib
import logging
import platform
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from .component import Component, EncodedValue
from .components.files import FileTokenComponent
from .components.network import AdapterSource, MacAddressComponent
from .components.system import MachineNameComponent, OsVersionComponent, UserNameComponent
from .encoders import Encoder, PlainTextEncoder
from .executor import CommandExecutor
from .formatters import Formatter, default_formatter
from .platforms import LinuxBuilder, MacBuilder, WindowsBuilder

logger = logging.getLogger(__name__)


class OperatingSystem(Enum):
    WINDOWS = 'windows'
    LINUX = 'linux'
    MAC = 'mac'


_system_map = {
    'windows': OperatingSystem.WINDOWS,
    'linux': OperatingSystem.LINUX,
    'darwin': OperatingSystem.MAC,
}


def detect_os() -> Optional[OperatingSystem]:
    return _system_map.get(platform.system().lower())


@dataclass(frozen=True)
class ComponentEntry:
    component: Component
    encoder: Encoder = field(default_factory=PlainTextEncoder)


class DeviceIdBuilder:
    """Ordered set of named components plus the formatter that combines them.

    Names are unique: adding a name again replaces its component but keeps
    the position where the name was first added.
    """

    def __init__(self,
                 executor: Optional[CommandExecutor] = None,
                 os_detector: Callable[[], Optional[OperatingSystem]] = detect_os):
        self._entries: Dict[str, ComponentEntry] = {}
        self._formatter: Optional[Formatter] = None
        self._executor = executor
        self._os_detector = os_detector

    def __str__(self):
        return self.get_device_id() or ''

    @property
    def names(self) -> List[str]:
        return list(self._entries)

    @property
    def formatter(self) -> Formatter:
        return self._formatter or default_formatter()

    def add_component(self,
                      name: str,
                      component: Component,
                      encoder: Optional[Encoder] = None) -> 'DeviceIdBuilder':
        if name in self._entries:
            logger.debug(f'component {name} replaced by {component!r}')
        self._entries[name] = ComponentEntry(component, encoder or PlainTextEncoder())
        return self

    def use_formatter(self, formatter: Formatter) -> 'DeviceIdBuilder':
        self._formatter = formatter
        return self

    def on_operating_system(self,
                            os: OperatingSystem,
                            configure: Callable[['DeviceIdBuilder'], object]) -> 'DeviceIdBuilder':
        if self._os_detector() == os:
            configure(self)
        return self

    def on_windows(self, configure: Callable[[WindowsBuilder], object]) -> 'DeviceIdBuilder':
        return self.on_operating_system(
            OperatingSystem.WINDOWS, lambda b: configure(WindowsBuilder(b, self._executor)))

    def on_linux(self, configure: Callable[[LinuxBuilder], object]) -> 'DeviceIdBuilder':
        return self.on_operating_system(
            OperatingSystem.LINUX, lambda b: configure(LinuxBuilder(b, self._executor)))

    def on_mac(self, configure: Callable[[MacBuilder], object]) -> 'DeviceIdBuilder':
        return self.on_operating_system(
            OperatingSystem.MAC, lambda b: configure(MacBuilder(b, self._executor)))

    def add_user_name(self, normalize: bool = False) -> 'DeviceIdBuilder':
        return self.add_component('UserName', UserNameComponent(normalize))

    def add_machine_name(self) -> 'DeviceIdBuilder':
        return self.add_component('MachineName', MachineNameComponent())

    def add_os_version(self) -> 'DeviceIdBuilder':
        return self.add_component('OSVersion', OsVersionComponent())

    def add_mac_address(self,
                        exclude_wireless: bool = False,
                        exclude_docker_bridge: bool = False,
                        source: Optional[AdapterSource] = None) -> 'DeviceIdBuilder':
        return self.add_component(
            'MACAddress', MacAddressComponent(exclude_wireless, exclude_docker_bridge, source))

    def add_file_token(self, path: str) -> 'DeviceIdBuilder':
        # the path itself may be sensitive, so only its hash goes into the name
        path_hash = hashlib.sha256(str(path).encode('utf-8')).hexdigest().upper()
        return self.add_component(f'FileToken_{path_hash}', FileTokenComponent(path))

    def collect(self) -> List[EncodedValue]:
        values = []
        for name, entry in self._entries.items():
            try:
                raw = entry.component.produce()
            except Exception as e:
                logger.warning(f'component {name} ({entry.component!r}) raised: {e}')
                raw = None
            if raw is None or raw == '':
                values.append(EncodedValue(name, ''))
                continue
            values.append(EncodedValue(name, entry.encoder.encode(raw)))
        return values

    def format(self, values: Sequence[EncodedValue]) -> str:
        return self.formatter.format(values)

    def get_device_id(self) -> Optional[str]:
        if not self._entries:
            logger.debug('builder has no components')
            return None
        return self.format(self.collect())
