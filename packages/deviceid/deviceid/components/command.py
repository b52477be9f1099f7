import logging
from typing import Callable, Optional

from ..component import Component
from ..executor import CommandExecutionError, CommandExecutor

logger = logging.getLogger(__name__)


class CommandComponent(Component):
    """Output of a shell command run through `executor`.

    `parse` post-processes the raw stdout; returning None or an empty string
    from it means the signal is unavailable.
    """

    def __init__(self,
                 command: str,
                 executor: CommandExecutor,
                 trim: bool = True,
                 parse: Optional[Callable[[str], Optional[str]]] = None):
        self._command = command
        self._executor = executor
        self._trim = trim
        self._parse = parse

    def __repr__(self):
        return f'CommandComponent({self._command!r})'

    def produce(self) -> Optional[str]:
        try:
            output = self._executor.execute(self._command)
        except CommandExecutionError as e:
            logger.debug(f'{self!r} unavailable: {e}')
            return None
        if self._parse is not None:
            try:
                output = self._parse(output)
            except ValueError as e:
                logger.debug(f'{self!r} output not understood: {e}')
                return None
            if output is None:
                return None
        if self._trim:
            output = output.strip()
        return output or None
