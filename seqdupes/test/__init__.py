import contextlib
import functools
import gzip
import os.path
import shutil
import tempfile
import unittest

modules = [
    'test_seqio',
    'test_dedup',
    'test_seqdupes_script',
]


def data_path(*parts):
    return os.path.join(os.path.dirname(__file__), 'data', *parts)


def corrupt_gzip(data):
    """
    gzip ``data``, then mark the first deflate block with the reserved block
    type so inflating it fails
    """
    compressed = bytearray(gzip.compress(data))
    compressed[10] = 0xff
    return bytes(compressed)


@contextlib.contextmanager
def scratch_dir():
    """
    Yields a function joining paths onto a temporary directory, removed on exit
    """
    td = tempfile.mkdtemp(prefix='seqdupes-')
    try:
        yield functools.partial(os.path.join, td)
    finally:
        shutil.rmtree(td)


def suite():
    s = unittest.TestSuite()
    for m in modules:
        module = __import__(__name__ + '.' + m, fromlist=m)
        s.addTests(module.suite())

    return s
