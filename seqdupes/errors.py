"""
Exceptions raised while deduplicating. All of them end the run.
"""


class SeqDupesError(Exception):
    stage = 'processing'

    def __str__(self):
        return '{0} failed: {1}'.format(self.stage, Exception.__str__(self))


class UnreadableInput(SeqDupesError):
    stage = 'reading input'


class UnrecognizedFormat(SeqDupesError, ValueError):
    stage = 'detecting format'


class MalformedRecord(SeqDupesError, ValueError):
    stage = 'parsing records'


class InvalidEncoding(SeqDupesError, ValueError):
    stage = 'decoding sequence'


class OutputWriteFailure(SeqDupesError):
    stage = 'writing output'
