import logging
from typing import Callable, Dict, List, Optional

from .builder import DeviceIdBuilder
from .executor import CommandExecutor

logger = logging.getLogger(__name__)


class DeviceIdManager:
    """Versioned builders, newest usable one wins.

    A version is usable when at least one of its components produced a
    value. Versions whose components all come back empty (for example a
    container without access to hardware serials) are skipped in favour of
    the next older version, so adding signals in a new version never leaves
    a device without an identifier it could compute before.
    """

    def __init__(self, executor: Optional[CommandExecutor] = None):
        self._builders: Dict[int, DeviceIdBuilder] = {}
        self._executor = executor

    @property
    def versions(self) -> List[int]:
        return sorted(self._builders, reverse=True)

    def add_builder(self,
                    version: int,
                    configure: Callable[[DeviceIdBuilder], object]) -> 'DeviceIdManager':
        builder = DeviceIdBuilder(executor=self._executor)
        configure(builder)
        if version in self._builders:
            logger.debug(f'builder version {version} replaced')
        self._builders[version] = builder
        return self

    def _usable_device_id(self, version: int) -> Optional[str]:
        builder = self._builders.get(version)
        if builder is None:
            return None
        try:
            values = builder.collect()
            if not any(v.value for v in values):
                logger.info(f'builder version {version} produced no signal')
                return None
            return builder.format(values) or None
        except Exception as e:
            logger.warning(f'builder version {version} failed: {e}')
            return None

    def get_device_id(self, version: Optional[int] = None) -> Optional[str]:
        if version is not None:
            return self._usable_device_id(version)
        for v in self.versions:
            device_id = self._usable_device_id(v)
            if device_id:
                logger.debug(f'device id from builder version {v}')
                return device_id
        logger.warning(f'no usable device id among versions {self.versions}')
        return None

    def validate(self, device_id: str) -> bool:
        """True when some registered version currently computes `device_id`."""
        if not device_id:
            return False
        return any(self._usable_device_id(v) == device_id for v in self.versions)
