"""Look up mounted volumes."""

__all__ = [
    'MOUNT_DIR_PATH',
    'find_volume',
    'list_volumes',
]

import logging
import os
from pathlib import Path
from typing import List, Union

from .errors import ConversionError


LOG = logging.getLogger(__name__)


MOUNT_DIR_PATH = Path('/Volumes')


def find_volume(
    name: str,
    mount_dir_path: Union[Path, str] = MOUNT_DIR_PATH,
) -> Path:
    """Return the root path of the volume.

    When the entry under the mount directory is a symlink, it is followed
    exactly once and its target is returned as is (which may be relative
    or may itself be a symlink).  Otherwise the entry path is returned.
    """
    LOG.debug('look up volume %r in: %s', name, mount_dir_path)
    try:
        with os.scandir(mount_dir_path) as entries:
            for entry in entries:
                if entry.name != name:
                    continue
                if entry.is_symlink():
                    root_path = Path(os.readlink(entry.path))
                    LOG.debug('follow volume link: %s -> %s',
                              entry.path, root_path)
                else:
                    root_path = Path(entry.path)
                    LOG.debug('found volume: %s', root_path)
                return root_path
    except OSError as exc:
        raise ConversionError.io(exc) from exc
    raise ConversionError.volume_not_found(name)


def list_volumes(
    mount_dir_path: Union[Path, str] = MOUNT_DIR_PATH,
) -> List[str]:
    try:
        with os.scandir(mount_dir_path) as entries:
            return sorted(entry.name for entry in entries)
    except OSError as exc:
        raise ConversionError.io(exc) from exc
