from typing import Optional

from ..component import Component
from ..encoders import Encoder
from ..executor import CommandExecutor


class PlatformBuilder:
    """Platform specific view over a DeviceIdBuilder.

    Components added through the view land in the wrapped builder.
    """

    def __init__(self, builder, executor: Optional[CommandExecutor] = None):
        self._builder = builder
        self.executor = executor or self.default_executor()

    def __str__(self):
        return f'{self.__class__.__name__}({self.executor})'

    def default_executor(self) -> CommandExecutor:
        return CommandExecutor()

    def add_component(self,
                      name: str,
                      component: Component,
                      encoder: Optional[Encoder] = None):
        self._builder.add_component(name, component, encoder)
        return self
