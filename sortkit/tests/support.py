"""
Assorted utilities for use in tests.
"""

import contextlib
import functools
import io
import math
import os
import random
import sys
import unittest

import numpy as np

from sortkit import config


# The inputs every sort must handle, with their expected output
SCENARIOS = [
    ([3, 7, 1, 5, 2, -6, 15, 4, 33, -5], [-6, -5, 1, 2, 3, 4, 5, 7, 15, 33]),
    ([9, 9, 1, 8, 3, 0, 2, 0, 7, 15, 4, 3, 3],
     [0, 0, 1, 2, 3, 3, 3, 4, 7, 8, 9, 9, 15]),
    ([111, 333, 222], [111, 222, 333]),
    ([2, 1], [1, 2]),
    ([1, 2], [1, 2]),
    ([5], [5]),
    ([], []),
]


class TestCase(unittest.TestCase):

    longMessage = True

    # A random state yielding the same random numbers for any test case.
    # Use as `self.random.<method name>`
    @functools.cached_property
    def random(self):
        return np.random.RandomState(42)

    def random_list(self, n, offset=10):
        random.seed(42)
        l = list(range(offset, offset + n))
        random.shuffle(l)
        return l

    def sorted_list(self, n, offset=10):
        return list(range(offset, offset + n))

    def revsorted_list(self, n, offset=10):
        return list(range(offset, offset + n))[::-1]

    def initially_sorted_list(self, n, m=None, offset=10):
        if m is None:
            m = n // 2
        l = self.sorted_list(m, offset)
        l += self.random_list(n - m, offset=l[-1] + offset)
        return l

    def duprandom_list(self, n, factor=None, offset=10):
        random.seed(42)
        if factor is None:
            factor = int(math.sqrt(n))
        l = (list(range(offset, offset + (n // factor) + 1)) * (factor + 1))[:n]
        assert len(l) == n
        random.shuffle(l)
        return l

    def dupsorted_list(self, n, factor=None, offset=10):
        if factor is None:
            factor = int(math.sqrt(n))
        l = (list(range(offset, offset + (n // factor) + 1)) * (factor + 1))[:n]
        assert len(l) == n, (len(l), n)
        l.sort()
        return l

    def uniform_list(self, n, value=7):
        return [value] * n

    def organ_pipe_list(self, n, offset=10):
        half = self.sorted_list(n // 2, offset)
        return half + self.revsorted_list(n - n // 2, offset)

    def make_sample_lists(self, n):
        lists = []
        for offset in (20, 120):
            lists.append(self.sorted_list(n, offset))
            lists.append(self.revsorted_list(n, offset))
            lists.append(self.random_list(n, offset))
            lists.append(self.duprandom_list(n, offset=offset))
            lists.append(self.dupsorted_list(n, offset=offset))
            lists.append(self.initially_sorted_list(n, offset=offset))
        lists.append(self.uniform_list(n))
        lists.append(self.organ_pipe_list(n))
        return lists

    def check_sort(self, func, orig):
        keys = self.array_factory(orig)
        func(keys, 0, len(keys))
        self.assertSorted(orig, keys)
        return keys

    def check_sort_subrange(self, func, orig):
        # Add sentinels at start and end, to check they weren't moved
        keys = self.array_factory([42] + orig + [-42])
        func(keys, 1, len(keys) - 1)
        self.assertEqual(keys[0], 42)
        self.assertEqual(keys[-1], -42)
        self.assertSorted(orig, keys[1:-1])

    def check_scenarios(self, func):
        for orig, expected in SCENARIOS:
            keys = self.array_factory(orig)
            func(keys, 0, len(keys))
            self.assertEqual(list(keys), expected)

    def check_idempotent(self, func, orig):
        keys = self.array_factory(orig)
        func(keys, 0, len(keys))
        once = list(keys)
        func(keys, 0, len(keys))
        self.assertEqual(list(keys), once)

    def assertSorted(self, orig, result):
        self.assertEqual(len(result), len(orig))
        # sorted() returns a list, so make sure we compare to another list
        self.assertEqual(list(result), sorted(orig))

    def assertStable(self, orig, result, key):
        """
        Check *result* is *orig* sorted by *key*, with the elements of
        equal key in their original relative order.  The elements of
        *orig* must be unique.
        """
        self.assertEqual(list(result), sorted(orig, key=key))
        position = dict((v, i) for i, v in enumerate(orig))
        for a, b in zip(result[:-1], result[1:]):
            if key(a) == key(b):
                self.assertLess(position[a], position[b])


@contextlib.contextmanager
def override_config(name, value):
    """
    Return a context manager that temporarily sets sortkit config variable
    *name* to *value*.  *name* must be the name of an existing variable
    in sortkit.config.
    """
    old_value = getattr(config, name)
    setattr(config, name, value)
    try:
        yield
    finally:
        setattr(config, name, old_value)


@contextlib.contextmanager
def override_env_config(name, value):
    """
    Return a context manager that temporarily sets a sortkit config
    environment *name* to *value*.
    """
    old = os.environ.get(name)
    os.environ[name] = value
    config.reload_config()

    try:
        yield
    finally:
        if old is None:
            # If it wasn't set originally, delete the environ var
            del os.environ[name]
        else:
            # Otherwise, restore to the old value
            os.environ[name] = old
        # Always reload config
        config.reload_config()


@contextlib.contextmanager
def captured_output(stream_name):
    """Return a context manager used by captured_stdout/stdin/stderr
    that temporarily replaces the sys stream *stream_name* with a StringIO."""
    orig_stdout = getattr(sys, stream_name)
    setattr(sys, stream_name, io.StringIO())
    try:
        yield getattr(sys, stream_name)
    finally:
        setattr(sys, stream_name, orig_stdout)


def captured_stdout():
    """Capture the output of sys.stdout:

       with captured_stdout() as stdout:
           print("hello")
       self.assertEqual(stdout.getvalue(), "hello\n")
    """
    return captured_output("stdout")


def captured_stderr():
    """Capture the output of sys.stderr:

       with captured_stderr() as stderr:
           print("hello", file=sys.stderr)
       self.assertEqual(stderr.getvalue(), "hello\n")
    """
    return captured_output("stderr")


def int_array(lst):
    return np.array(lst, dtype=np.int64)
