import bz2
import gzip
import os.path
import sys


def is_stdio(path):
    return path == '-'


def opener(mode, *args, **kwargs):
    """
    Open a file, with optional compression based on extension

    ``-`` maps to standard input or output; in binary mode the underlying
    byte buffer is returned.
    """
    exts = {'.bz2': bz2.BZ2File,
            '.gz': gzip.open}
    def open_file(path):
        if is_stdio(path):
            stream = sys.stdin if mode.startswith('r') else sys.stdout
            if 'b' in mode:
                return stream.buffer
            return stream

        open_fn = exts.get(os.path.splitext(path)[1], open)
        return open_fn(path, mode, *args, **kwargs)
    return open_file
