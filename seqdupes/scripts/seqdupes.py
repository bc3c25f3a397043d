"""
Reduce duplicate sequences in a FASTA or FASTQ file
"""

import argparse
import logging
import sys

import colored_traceback

from .. import dedup, __version__ as version
from ..errors import SeqDupesError

DESCRIPTION = __doc__.strip()

log = logging.getLogger('seqdupes')


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    arguments = parse_arguments(argv)

    loglevel = {
        0: logging.ERROR,
        1: logging.WARNING,
        2: logging.INFO,
        3: logging.DEBUG,
    }.get(arguments.verbosity, logging.DEBUG)

    # set up logging
    logging.basicConfig(stream=sys.stderr, level=loglevel,
                        format='%(name)s: %(levelname)s: %(message)s')

    debug = arguments.verbosity >= 3
    if debug:
        colored_traceback.add_hook()

    try:
        return action(arguments)
    except SeqDupesError as e:
        if debug:
            raise
        log.error('%s', e)
        return 1


def action(a):
    summary = dedup.process(a.fasta, a.json, by_header=a.by_header,
                            representative=a.representative)
    print(dedup.summary_line(summary), file=sys.stderr)
    return 0


def parse_arguments(argv):
    parser = argparse.ArgumentParser(prog='seqdupes', description=DESCRIPTION)

    parser.add_argument('-V', '--version', action='version',
        version='seqdupes v' + version,
        help='Print the version number and exit')

    parser.add_argument('-f', '--fasta', required=True,
        help="""The input FASTA or FASTQ file (gzip or bzip2 acceptable, '-'
        for standard input).""")
    parser.add_argument('-j', '--json', required=True,
        help='The duplicate list in JSON')
    parser.add_argument('--by-header', action='store_true',
        help='Collapse records with identical headers instead of identical '
             'sequences')
    parser.add_argument('--representative', choices=dedup.REPRESENTATIVES,
        default='last',
        help="""Which header of a duplicate group names the emitted record
        [default: %(default)s]""")

    parser.add_argument('-v', '--verbose',
        action='count', dest='verbosity', default=1,
        help='Increase verbosity of screen output (eg, -v is verbose, '
             '-vv more so)')
    parser.add_argument('-q', '--quiet',
        action='store_const', dest='verbosity', const=0,
        help='Only log errors; the summary line is still written')

    return parser.parse_args(argv)


if __name__ == '__main__':
    sys.exit(main())
