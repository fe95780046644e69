"""Convert HFS paths into POSIX paths.

Some Mac OS APIs use HFS paths, which use ":" as the directory separator
and start with a volume name, like "Macintosh SSD:folder1:file".  The
volume name is resolved against the entries of /Volumes.
"""

__all__ = [
    'MOUNT_DIR_PATH',
    'ConversionError',
    'ErrorKind',
    'compose_path',
    'convert_path',
]

import logging
from pathlib import Path
from typing import Iterable, Union

from . import segments as _segments
from .errors import ConversionError
from .errors import ErrorKind
from .volumes import MOUNT_DIR_PATH
from .volumes import find_volume


LOG = logging.getLogger(__name__)


def convert_path(
    path: str,
    *,
    mount_dir_path: Union[Path, str] = MOUNT_DIR_PATH,
) -> Path:
    """Convert an HFS path into an absolute POSIX path.

    Raise ConversionError on failure; nothing is retried.
    """
    volume_name, *rest = _segments.split_path(path)
    volume_root = find_volume(
        _segments.escape_segment(volume_name),
        mount_dir_path,
    )
    converted_path = compose_path(volume_root, rest)
    LOG.debug('convert: %r -> %s', path, converted_path)
    return converted_path


def compose_path(volume_root: Path, segments: Iterable[str]) -> Path:
    path = Path(volume_root)
    for segment in segments:
        path /= _segments.escape_segment(segment)
    return path
