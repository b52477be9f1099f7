from ..components.command import CommandComponent
from .base import PlatformBuilder


class MacBuilder(PlatformBuilder):

    def add_platform_serial_number(self) -> 'MacBuilder':
        return self.add_component(
            'IOPlatformSerialNumber',
            CommandComponent(
                "ioreg -l | grep IOPlatformSerialNumber | sed 's/.*= //' | sed 's/\"//g'",
                self.executor))

    def add_system_drive_volume_uuid(self) -> 'MacBuilder':
        return self.add_component(
            'SystemDriveVolumeUUID',
            CommandComponent("diskutil info / | sed -n 's/.*Volume UUID: *//p'", self.executor))
