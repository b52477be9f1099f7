import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from ..component import Component

logger = logging.getLogger(__name__)

# 12:cpuset:/docker/<id> (cgroup v1) and 0::/system.slice/docker-<id>.scope
_pattern_docker_cgroup = re.compile(r'\d+:[^:]*:(?:/.+?)??/docker[-/]([0-9a-f]+)')


def find_container_id(lines: Iterable[str]) -> Optional[str]:
    for line in lines:
        match = _pattern_docker_cgroup.search(line)
        if match:
            return match.group(1)
    return None


class DockerContainerIdComponent(Component):

    def __init__(self, cgroup_file: str = '/proc/self/cgroup'):
        self._cgroup_file = cgroup_file

    def __repr__(self):
        return f'DockerContainerIdComponent({self._cgroup_file!r})'

    def produce(self) -> Optional[str]:
        if not self._cgroup_file or not self._cgroup_file.strip():
            return None
        try:
            with Path(self._cgroup_file).open('r', encoding='utf-8', errors='replace') as f:
                return find_container_id(f)
        except OSError as e:
            logger.debug(f'cannot read {self._cgroup_file}: {e}')
            return None
