import logging
import subprocess
from typing import List, Optional

from .config import config

logger = logging.getLogger(__name__)


class CommandExecutionError(Exception):
    pass


class CommandExecutor:
    """Runs shell command lines and returns their stdout.

    Components that need the OS take an executor at construction; there is
    no process wide default instance.
    """

    _shell_prefixes = {
        'bash': ['/bin/bash', '-c'],
        'sh': ['/bin/sh', '-c'],
        'cmd': ['cmd.exe', '/c'],
        'powershell': ['powershell', '-NoProfile', '-NonInteractive', '-Command'],
    }

    def __init__(self, shell: Optional[str] = None, timeout: Optional[int] = None):
        shell = shell or config.DEVICEID_SHELL
        if shell not in self._shell_prefixes:
            raise ValueError(f'Unsupported shell: {shell}')
        self.shell = shell
        self.timeout = timeout if timeout is not None else config.DEVICEID_COMMAND_TIMEOUT

    @classmethod
    def bash(cls, timeout: Optional[int] = None) -> 'CommandExecutor':
        return cls('bash', timeout=timeout)

    @classmethod
    def powershell(cls, timeout: Optional[int] = None) -> 'CommandExecutor':
        return cls('powershell', timeout=timeout)

    def __str__(self):
        return f'CommandExecutor({self.shell})'

    def build_args(self, command: str) -> List[str]:
        return self._shell_prefixes[self.shell] + [command]

    def execute(self, command: str) -> str:
        args = self.build_args(command)
        logger.debug(f'will run cmd: {args}')
        try:
            result = subprocess.run(args,
                                    capture_output=True,
                                    text=True,
                                    errors='replace',
                                    timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise CommandExecutionError(
                f'command timed out after {self.timeout}s: {command}') from e
        except OSError as e:
            raise CommandExecutionError(f'failed to run {command}: {e}') from e
        if result.returncode != 0:
            raise CommandExecutionError(
                f'command {command} exited with {result.returncode}: {result.stderr.strip()}')
        return result.stdout
