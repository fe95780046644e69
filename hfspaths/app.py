"""Command-line front end of convert_path.

Its startup dependency graph is:

  PARSER ---> PARSE --+--> ARGS ---> CONFIGURED
                      |
              ARGV ---+
"""

__all__ = [
    'ARGS',
    'ARGV',
    'CONFIGURED',
    'PARSE',
    'PARSER',
    'main',
]

import argparse
import logging
import os
import sys
import threading

from startup import Startup

import hfspaths
from hfspaths import volumes


ARGS = 'args'
ARGV = 'argv'
CONFIGURED = 'configured'
PARSE = 'parse'
PARSER = 'parser'


LOG = logging.getLogger(__name__)


_LOG_FORMAT = (
    '%(asctime)s %(threadName)s %(levelname)s %(name)s: %(message)s'
)


def add_arguments(parser: PARSER) -> PARSE:
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='verbose output')
    parser.add_argument(
        '--mount-dir', default=str(volumes.MOUNT_DIR_PATH),
        help="""set directory of mounted volumes (default %(default)s)""")
    parser.add_argument(
        '--list-volumes', action='store_true',
        help="""list mounted volumes and exit""")
    parser.add_argument(
        'hfs_paths', metavar='HFS_PATH', nargs='*',
        help="""HFS path, like "Macintosh SSD:folder:file" """)


def parse_argv(parser: PARSER, argv: ARGV, _: PARSE) -> ARGS:
    return parser.parse_args(argv[1:])


def configure(args: ARGS) -> CONFIGURED:
    if args.verbose == 0:
        level = logging.WARNING
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    configure_logging(level)


def configure_logging(level):
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    threading.current_thread().name = hfspaths.__name__ + '#main'


def run(args, stdout, stderr):
    if args.list_volumes:
        try:
            names = volumes.list_volumes(args.mount_dir)
        except hfspaths.ConversionError as exc:
            stderr.write('%s: %s\n' % (hfspaths.__name__, exc))
            return 1
        for name in names:
            stdout.write('%s\n' % name)
        return 0

    status = 0
    for hfs_path in args.hfs_paths:
        try:
            path = hfspaths.convert_path(
                hfs_path,
                mount_dir_path=args.mount_dir,
            )
        except hfspaths.ConversionError as exc:
            LOG.info('cannot convert %r: %r', hfs_path, exc)
            stderr.write('%s: %s\n' % (hfspaths.__name__, exc))
            status = 1
        else:
            stdout.write('%s\n' % path)
    return status


def main(argv, startup=None, stdout=None, stderr=None):
    startup = startup or Startup()
    startup.set(PARSER, argparse.ArgumentParser(
        prog=hfspaths.__name__,
        description="""Convert HFS paths into POSIX paths.""",
    ))
    startup.set(ARGV, argv)
    startup(add_arguments)
    startup(parse_argv)
    startup(configure)
    varz = startup.call()
    return run(
        varz[ARGS],
        stdout=stdout or sys.stdout,
        stderr=stderr or sys.stderr,
    )


if os.environ.get('DEBUG') not in (None, '', '0'):
    configure_logging(logging.DEBUG)
    LOG.debug('start at DEBUG level')
