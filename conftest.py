import sys
import numpy as np


def is_jit_test(item):
    """ Whether the test belongs to a class exercising compiled code
    """
    cls = getattr(item, 'cls', None)
    return bool(getattr(cls, '_sortkit_jit_test_', False))


def pytest_addoption(parser):
    parser.addoption("--runtype",  action="store", default="all",
                    help="run 'all' tests, only the pure 'python' ones or "
                         "only the 'jit' ones")


def pytest_collection_modifyitems(session, config, items):

    ty = config.getoption("runtype")
    keep = []
    if ty == "all":
        keep.extend(items)
    elif ty == "python":
        for item in items:
            if not is_jit_test(item):
                keep.append(item)
    elif ty == "jit":
        for item in items:
            if is_jit_test(item):
                keep.append(item)
    else:
        raise ValueError("Unknown type specified in `--runtype`: %s" % ty)

    # clobber existing items
    items.clear()
    items.extend(keep)

    print("\n", "-" * 80)
    print("Test target '%s' has: %s active tests (numpy %s, Python %s)."
          % (ty, len(items), np.__version__, sys.version.split()[0]))
