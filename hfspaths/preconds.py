__all__ = [
    'check_path',
]

import logging

from .errors import ConversionError


LOG = logging.getLogger(__name__)


def check_path(cond, message=None, *message_args):
    if not cond:
        if message is not None:
            LOG.debug('reject HFS path: ' + message, *message_args)
        raise ConversionError.invalid_path()
