from typing import Optional

from ..components.command import CommandComponent
from ..executor import CommandExecutor
from .base import PlatformBuilder

_placeholder_values = {'', 'none', 'default string', 'to be filled by o.e.m.', 'system serial number'}


def join_cim_values(output: str) -> Optional[str]:
    '''one value per line (one per cpu, disk, ...) -> "a,b", placeholders dropped'''
    values = [line.strip() for line in output.splitlines()]
    values = [v for v in values if v.lower() not in _placeholder_values]
    return ','.join(values) or None


class WindowsBuilder(PlatformBuilder):

    def default_executor(self) -> CommandExecutor:
        return CommandExecutor.powershell()

    def _add_query(self, name: str, command: str) -> 'WindowsBuilder':
        return self.add_component(name, CommandComponent(command, self.executor, parse=join_cim_values))

    def add_machine_guid(self) -> 'WindowsBuilder':
        return self._add_query(
            'MachineGuid',
            "(Get-ItemProperty -Path 'HKLM:\\SOFTWARE\\Microsoft\\Cryptography' -Name MachineGuid).MachineGuid")

    def add_processor_id(self) -> 'WindowsBuilder':
        return self._add_query('ProcessorId', '(Get-CimInstance -ClassName Win32_Processor).ProcessorId')

    def add_motherboard_serial_number(self) -> 'WindowsBuilder':
        return self._add_query('MotherboardSerialNumber',
                               '(Get-CimInstance -ClassName Win32_BaseBoard).SerialNumber')

    def add_system_drive_serial_number(self) -> 'WindowsBuilder':
        return self._add_query('SystemDriveSerialNumber',
                               '(Get-Partition -DriveLetter $env:SystemDrive[0] | Get-Disk).SerialNumber')
