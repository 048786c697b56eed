import sys
import unittest


def _main(argv, **kwds):
    # This helper function assumes the first element of argv
    # is the name of the calling program.
    prog = unittest.TestProgram(module=None, argv=argv,
                                defaultTest='sortkit.tests', exit=False,
                                **kwds)
    return prog.result.wasSuccessful()


def main(*argv, **kwds):
    """keyword arguments are passed on to unittest.TestProgram"""
    return _main(['<main>'] + list(argv), **kwds)


if __name__ == '__main__':
    sys.exit(0 if _main(sys.argv) else 1)
