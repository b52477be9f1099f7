import logging
from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Component(ABC):
    """A single source of identity signal.

    Implementations must not raise from `produce`: any failure to read the
    underlying signal is reported as None.
    """

    @abstractmethod
    def produce(self) -> Optional[str]:
        pass

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class StaticComponent(Component):

    def __init__(self, value: Optional[str]):
        self._value = value

    def produce(self) -> Optional[str]:
        return self._value or None

    def __repr__(self):
        return f'StaticComponent({self._value!r})'


class CallableComponent(Component):
    """Wraps a zero argument callable, mapping exceptions to None."""

    def __init__(self, func: Callable[[], Optional[str]]):
        self._func = func

    def produce(self) -> Optional[str]:
        try:
            value = self._func()
        except Exception as e:
            logger.debug(f'{self._func!r} failed: {e}')
            return None
        if value is None:
            return None
        return str(value) or None


class EncodedValue(NamedTuple):
    name: str
    value: str
