import logging
import sys

import fire

from .builder import DeviceIdBuilder
from .formatters import HashFormatter, JsonFormatter, StringFormatter, XmlFormatter
from .log import setup_logging
from .manager import DeviceIdManager

logger = logging.getLogger(__name__)

_formatters = {
    'hash': HashFormatter,
    'string': StringFormatter,
    'json': JsonFormatter,
    'xml': XmlFormatter,
}


def _hardware_signals(builder: DeviceIdBuilder, exclude_wireless: bool, exclude_docker_bridge: bool):
    builder.on_windows(lambda windows: windows
                       .add_machine_guid()
                       .add_processor_id()
                       .add_motherboard_serial_number()
                       .add_system_drive_serial_number())
    builder.on_linux(lambda linux: linux
                     .add_machine_id()
                     .add_cpu_info()
                     .add_motherboard_serial_number()
                     .add_system_drive_serial_number())
    builder.on_mac(lambda mac: mac
                   .add_system_drive_volume_uuid()
                   .add_platform_serial_number())
    builder.add_mac_address(exclude_wireless=exclude_wireless,
                            exclude_docker_bridge=exclude_docker_bridge)


def build_manager(formatter: str = 'hash',
                  exclude_wireless: bool = False,
                  exclude_docker_bridge: bool = False) -> DeviceIdManager:
    if formatter not in _formatters:
        raise ValueError(f'Unsupported formatter: {formatter}, choose from {sorted(_formatters)}')
    formatter_cls = _formatters[formatter]
    return (DeviceIdManager()
            .add_builder(1, lambda b: b
                         .add_machine_name()
                         .add_os_version()
                         .use_formatter(formatter_cls()))
            .add_builder(2, lambda b: _hardware_signals(
                b.use_formatter(formatter_cls()), exclude_wireless, exclude_docker_bridge)))


def show(formatter: str = 'hash',
         exclude_wireless: bool = False,
         exclude_docker_bridge: bool = False,
         debug: bool = False):
    setup_logging(debug)
    manager = build_manager(formatter, exclude_wireless, exclude_docker_bridge)
    device_id = manager.get_device_id()
    if device_id is None:
        print('no device id available on this host', file=sys.stderr)
        sys.exit(1)
    print(device_id)


def components(exclude_wireless: bool = False, exclude_docker_bridge: bool = False, debug: bool = False):
    '''print every component of the newest builder with its encoded value'''
    setup_logging(debug)
    builder = DeviceIdBuilder()
    _hardware_signals(builder, exclude_wireless, exclude_docker_bridge)
    for value in builder.collect():
        print(f'{value.name}: {value.value or "<unavailable>"}')


def main():
    cmds = dict(show=show, components=components)
    fire.Fire(cmds)


if __name__ == '__main__':
    main()
