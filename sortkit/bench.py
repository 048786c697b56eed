"""
Benchmark harness: run the registered algorithms over a battery of fixed and
random datasets, time each run and check that the output is sorted.
"""

import collections
import logging
import sys
from timeit import default_timer as timer

import numpy as np

from sortkit import config
from sortkit.registry import get_algorithm, get_sort


logger = logging.getLogger(__name__)


# Small hand-written inputs, including the degenerate ones
FIXED_DATASETS = (
    [111, 333, 222],
    [3, 7, 1, 5, 2, -6, 15, 4, 33, -5],
    [9, 9, 1, 8, 3, 0, 2, 0, 7, 15, 4, 3, 3],
    [2, 1],
    [1, 2],
    [5],
    [],
)

DEFAULT_SIZES = (6, 1000, 10000, 100000)

# Random keys span the whole int32 range
_INT32 = np.iinfo(np.int32)


RunResult = collections.namedtuple(
    'RunResult', ('name', 'label', 'size', 'elapsed', 'ok', 'output'))


def generate(size, random_state):
    """
    Return *size* random integers drawn from *random_state*, a
    numpy.random.RandomState.
    """
    return random_state.randint(_INT32.min, _INT32.max, size=size,
                                dtype=np.int64)


def make_datasets(sizes=DEFAULT_SIZES, seed=None, backend=None):
    """
    Return the fixed datasets followed by one random dataset per size,
    as lists for the 'python' backend and int64 arrays for 'jit'.
    """
    if backend is None:
        backend = config.BACKEND
    random_state = np.random.RandomState(seed)
    datasets = [np.array(d, dtype=np.int64) for d in FIXED_DATASETS]
    datasets += [generate(n, random_state) for n in sizes]
    if backend == 'python':
        datasets = [d.tolist() for d in datasets]
    return datasets


def is_sorted(A, first=0, last=None):
    """
    Whether A[first:last] is non-decreasing.
    """
    if last is None:
        last = len(A)
    for i in range(first + 1, last):
        if A[i] < A[i - 1]:
            return False
    return True


def _copy(data):
    if isinstance(data, np.ndarray):
        return data.copy()
    return list(data)


def format_sequence(data):
    return "[%s]" % ", ".join(str(x) for x in data)


def run_one(name, data, backend=None, warmup=None):
    """
    Sort a private copy of *data* with the algorithm *name* and return a
    RunResult.  The elapsed time is in milliseconds.
    """
    if warmup is None:
        warmup = config.WARMUP
    algo = get_algorithm(name)
    func = get_sort(name, backend)

    if warmup and len(data) > 0:
        # Trigger JIT compilation for this argument type outside the timing
        tiny = _copy(data[:3])
        func(tiny, 0, len(tiny))

    work = _copy(data)
    ts = timer()
    func(work, 0, len(work))
    te = timer()

    elapsed = 1000 * (te - ts)
    ok = len(work) == len(data) and is_sorted(work)
    logger.debug("%s on %d elements: %.3fms", name, len(data), elapsed)
    if not ok:
        logger.warning("%s left a %d-element sequence unsorted",
                       name, len(data))
    return RunResult(name, algo.label, len(data), elapsed, ok, work)


def run_battery(datasets, names, backend=None, slow_threshold=None,
                warmup=None, stream=None):
    """
    Run every algorithm in *names* over every dataset and print a report to
    *stream*.  Algorithms flagged slow are skipped for datasets longer than
    *slow_threshold*.  Returns the list of RunResults.
    """
    if slow_threshold is None:
        slow_threshold = config.SLOW_THRESHOLD
    if stream is None:
        stream = sys.stdout
    print_threshold = config.PRINT_THRESHOLD

    results = []
    for data in datasets:
        size = len(data)
        header = "%d-element vector" % size
        if size <= print_threshold:
            header += " " + format_sequence(data)
        print(header + ".", file=stream)

        for name in names:
            algo = get_algorithm(name)
            if algo.slow and size > slow_threshold:
                logger.info("skipping %s on %d elements (threshold %d)",
                            name, size, slow_threshold)
                continue
            res = run_one(name, data, backend=backend, warmup=warmup)
            line = "%s: %dms" % (res.label, res.elapsed)
            if size <= print_threshold:
                line += " " + format_sequence(res.output)
            line += " OK." if res.ok else " FAIL!!!"
            print(line, file=stream)
            results.append(res)

        print(file=stream)
    return results
