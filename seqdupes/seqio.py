"""
Reading and writing FASTA/FASTQ records.

Parsing is delegated to Biopython's low-level title/sequence parsers; the
format is chosen by peeking at the first byte of the input.
"""
import collections
import io
import logging
import re
import zlib

from Bio.SeqIO.FastaIO import SimpleFastaParser
from Bio.SeqIO.QualityIO import FastqGeneralIterator

from .errors import (InvalidEncoding, MalformedRecord, OutputWriteFailure,
                     UnreadableInput, UnrecognizedFormat)

log = logging.getLogger(__name__)

FASTA = 'fasta'
FASTQ = 'fastq'

_MARKERS = {b'>': FASTA, b'@': FASTQ}
_FIRST_SPACE = re.compile(r'\s')


class Record(collections.namedtuple('Record', ['id', 'description',
                                               'sequence', 'quality'])):
    """
    A single decoded entry. ``quality`` is None for FASTA records.
    """
    __slots__ = ()

    @property
    def entire_header(self):
        return '{0} {1}'.format(self.id, self.description or '').strip()


def buffered(fp):
    """
    Make sure ``fp`` supports ``peek``.
    """
    if hasattr(fp, 'peek'):
        return fp
    return io.BufferedReader(fp)


def sniff_format(fp):
    """
    Classify a buffered byte stream as FASTA or FASTQ from its first byte,
    leaving the byte in the stream. Empty input counts as FASTA.
    """
    try:
        head = fp.peek(1)[:1]
    except (OSError, EOFError, zlib.error) as e:
        raise UnreadableInput(str(e)) from e

    if not head:
        log.debug('Empty input, treating as %s', FASTA)
        return FASTA
    try:
        return _MARKERS[head]
    except KeyError:
        raise UnrecognizedFormat(
            'expected {0!r} (FASTA) or {1!r} (FASTQ) as first byte, got {2!r}'.format(
                '>', '@', head)) from None


def split_title(title):
    """
    Split a header line (without its marker) into identifier and description
    at the first whitespace character. Any further whitespace stays in the
    description, so ``entire_header`` reproduces the header line.
    """
    parts = _FIRST_SPACE.split(title.rstrip(), maxsplit=1)
    if len(parts) == 1:
        return parts[0], ''
    return parts[0], parts[1]


def _fasta_records(handle):
    # SimpleFastaParser drops spaces inside sequence lines
    for title, sequence in SimpleFastaParser(handle):
        name, description = split_title(title)
        yield Record(name, description, sequence, None)


def _fastq_records(handle):
    for title, sequence, quality in FastqGeneralIterator(handle):
        name, description = split_title(title)
        yield Record(name, description, sequence, quality)


_PARSERS = {FASTA: _fasta_records, FASTQ: _fastq_records}


def iter_records(fp, fmt):
    """
    Lazily decode records of format ``fmt`` from the byte stream ``fp``.

    The stream is read once; parse, decoding and read errors are fatal.
    """
    handle = io.TextIOWrapper(fp, encoding='utf-8', newline=None)
    records = _PARSERS[fmt](handle)
    try:
        while True:
            try:
                record = next(records)
            except StopIteration:
                return
            except UnicodeDecodeError as e:
                raise InvalidEncoding('input is not valid UTF-8: {0}'.format(e)) from e
            except ValueError as e:
                raise MalformedRecord(str(e)) from e
            except (OSError, EOFError, zlib.error) as e:
                raise UnreadableInput(str(e)) from e
            yield record
    finally:
        # leave the caller's stream open
        handle.detach()


def format_record(record, fmt):
    if fmt == FASTQ:
        return '@{0}\n{1}\n+\n{2}\n'.format(record.entire_header,
                                             record.sequence, record.quality)
    return '>{0}\n{1}\n'.format(record.entire_header, record.sequence)


def write_records(fp, records, fmt):
    """
    Write ``records`` to the text stream ``fp`` in order. Returns the number
    of records written.
    """
    count = 0
    try:
        for record in records:
            fp.write(format_record(record, fmt))
            count += 1
        fp.flush()
    except OSError as e:
        raise OutputWriteFailure(str(e)) from e
    log.debug('Wrote %d %s records', count, fmt)
    return count
