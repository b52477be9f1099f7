import logging
import uuid
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from ..component import Component

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileContentsComponent(Component):
    """Contents of the first readable file among `paths`.

    Lines starting with any of `skip_line_prefixes` are dropped, which keeps
    files such as /proc/cpuinfo stable across reads.
    """

    def __init__(self,
                 paths: Union[PathLike, Sequence[PathLike]],
                 skip_line_prefixes: Iterable[str] = ()):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._skip_line_prefixes = tuple(skip_line_prefixes)

    def __repr__(self):
        return f'FileContentsComponent({[str(p) for p in self._paths]})'

    def produce(self) -> Optional[str]:
        for path in self._paths:
            try:
                text = path.read_text(encoding='utf-8', errors='replace')
            except OSError as e:
                logger.debug(f'cannot read {path}: {e}')
                continue
            if self._skip_line_prefixes:
                lines = [
                    line for line in text.splitlines()
                    if not line.startswith(self._skip_line_prefixes)
                ]
                text = '\n'.join(lines)
            text = text.strip()
            if text:
                return text
        return None


class FileTokenComponent(Component):
    """A random token persisted in a file, created on first use."""

    def __init__(self, path: PathLike):
        self._path = Path(path)

    def __repr__(self):
        return f'FileTokenComponent({str(self._path)!r})'

    def produce(self) -> Optional[str]:
        try:
            if self._path.exists():
                return self._path.read_text(encoding='utf-8', errors='replace').strip() or None
            token = str(uuid.uuid4())
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(token, encoding='utf-8')
            logger.info(f'created device token file {self._path}')
            return token
        except OSError as e:
            logger.debug(f'cannot use token file {self._path}: {e}')
            return None
