import os
import unittest
from fnmatch import fnmatch
from os.path import dirname, splitext


def load_testsuite(loader, dir):
    """Find the test_*.py modules in 'dir'."""
    suite = unittest.TestSuite()
    for f in sorted(os.listdir(dir)):
        if fnmatch(f, 'test_*.py'):
            suite.addTests(loader.loadTestsFromName(
                '%s.%s' % (__name__, splitext(f)[0])))
    return suite


def load_tests(loader, tests, pattern):
    return load_testsuite(loader, dirname(__file__))
