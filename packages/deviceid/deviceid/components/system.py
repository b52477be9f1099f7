import getpass
import logging
import platform
from typing import Optional

from ..component import Component

logger = logging.getLogger(__name__)


class UserNameComponent(Component):

    def __init__(self, normalize: bool = False):
        self._normalize = normalize

    def produce(self) -> Optional[str]:
        try:
            user_name = getpass.getuser()
        except (OSError, KeyError, ImportError) as e:
            # getuser raises when neither env vars nor pwd know the user
            logger.debug(f'cannot get user name: {e}')
            return None
        if self._normalize:
            user_name = user_name.lower()
        return user_name or None


class MachineNameComponent(Component):

    def produce(self) -> Optional[str]:
        return platform.node() or None


class OsVersionComponent(Component):
    """Operating system name and version, e.g. "Linux 6.8.0-45-generic"."""

    def produce(self) -> Optional[str]:
        system = platform.system()
        if system == 'Darwin':
            version = platform.mac_ver()[0]
        elif system == 'Windows':
            version = platform.version()
        else:
            version = platform.release()
        if not system:
            return None
        return f'{system} {version}'.strip()
