"""Split HFS paths into segments."""

__all__ = [
    'POSIX_SEPARATOR',
    'SEPARATOR',
    'escape_segment',
    'split_path',
]

from typing import List

from . import preconds


SEPARATOR = ':'
POSIX_SEPARATOR = '/'


def split_path(path: str) -> List[str]:
    """Split an HFS path on every separator.

    Empty segments are preserved.  The first segment is the volume name.
    """
    preconds.check_path(
        isinstance(path, str), 'expect str, not %s', type(path).__name__
    )
    segments = path.split(SEPARATOR)
    preconds.check_path(segments, 'no segment in %r', path)
    return segments


def escape_segment(segment: str) -> str:
    # A "/" within an HFS name is ":" in the POSIX name.
    return segment.replace(POSIX_SEPARATOR, SEPARATOR)
