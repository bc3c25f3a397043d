"""
Group records by sequence (or header) and report the collapsed headers
"""
import collections
import json
import logging
import sys

from . import seqio, util
from .errors import OutputWriteFailure, UnreadableInput

log = logging.getLogger(__name__)

REPRESENTATIVES = ('last', 'first')

Report = collections.namedtuple('Report', ['records', 'headers'])
Summary = collections.namedtuple('Summary', ['total', 'unique', 'duplicates',
                                             'format'])


class DuplicateGroup(object):
    """
    All records sharing one dedup key. ``sequence`` and ``quality`` come from
    the first record seen; ``headers`` lists every header in encounter order.
    """
    __slots__ = ('sequence', 'quality', 'headers')

    def __init__(self, sequence, quality, header):
        self.sequence = sequence
        self.quality = quality
        self.headers = [header]

    def __repr__(self):
        return 'DuplicateGroup({0!r}, {1!r}, headers={2!r})'.format(
            self.sequence, self.quality, self.headers)

    def representative_id(self, representative='last'):
        if representative == 'first':
            return self.headers[0]
        return self.headers[-1]


class Deduplicator(object):
    def __init__(self, by_header=False):
        self.by_header = by_header
        self.groups = {}
        self.total = 0

    def key(self, record):
        if self.by_header:
            return record.entire_header
        return record.sequence

    def ingest(self, record):
        header = record.entire_header
        key = self.key(record)
        self.total += 1
        group = self.groups.get(key)
        if group is None:
            self.groups[key] = DuplicateGroup(record.sequence, record.quality,
                                              header)
        else:
            group.headers.append(header)

    def ingest_all(self, records):
        for record in records:
            self.ingest(record)
            if self.total % 1000000 == 0:
                log.info('%d records read, %d unique', self.total, self.unique)
        return self

    @property
    def unique(self):
        return len(self.groups)

    @property
    def duplicates(self):
        return self.total - self.unique

    def __len__(self):
        return len(self.groups)


def build_report(deduplicator, representative='last'):
    """
    Build the representative records and the header mapping for a finished
    ``Deduplicator``.

    One record is produced per group, named by the group's representative
    header (the last header seen for the key by default, or the first). Every
    group appears in the mapping, including groups with a single header.
    """
    if representative not in REPRESENTATIVES:
        raise ValueError('Unknown representative: {0}'.format(representative))

    records = []
    headers = {}
    for group in deduplicator.groups.values():
        name = group.representative_id(representative)
        if name in headers:
            log.warning('Representative %r names more than one group; '
                        'keeping the last in the header mapping', name)
        headers[name] = list(group.headers)
        records.append(seqio.Record(name, '', group.sequence, group.quality))
    return Report(records, headers)


def write_headers_json(headers, path):
    try:
        with open(path, 'w', encoding='utf-8') as fp:
            json.dump(headers, fp, ensure_ascii=False, separators=(',', ':'))
    except OSError as e:
        raise OutputWriteFailure('{0}: {1}'.format(path, e)) from e


def _open_input(infile):
    try:
        return util.opener('rb')(infile)
    except OSError as e:
        raise UnreadableInput('{0}: {1}'.format(infile, e)) from e


def process(infile, json_path, by_header=False, out=None,
            representative='last'):
    """
    Deduplicate ``infile`` (path, ``.gz``/``.bz2`` path, or ``-`` for stdin).

    Representative records go to ``out`` (default: standard output) in the
    input's format, the header mapping to ``json_path``. Nothing is written
    until the whole input has been read.
    """
    if out is None:
        out = sys.stdout

    fp = _open_input(infile)
    try:
        stream = seqio.buffered(fp)
        fmt = seqio.sniff_format(stream)
        log.info('Reading %s as %s, deduplicating by %s', infile, fmt,
                 'header' if by_header else 'sequence')
        deduplicator = Deduplicator(by_header=by_header)
        deduplicator.ingest_all(seqio.iter_records(stream, fmt))
    finally:
        if not util.is_stdio(infile):
            fp.close()

    report = build_report(deduplicator, representative=representative)
    seqio.write_records(out, report.records, fmt)
    write_headers_json(report.headers, json_path)
    log.info('Wrote header mapping for %d groups to %s', len(report.headers),
             json_path)

    return Summary(deduplicator.total, deduplicator.unique,
                   deduplicator.duplicates, fmt)


def summary_line(summary):
    return 'Processed {0} sequences: {1} unique, {2} duplicates removed'.format(
        summary.total, summary.unique, summary.duplicates)
