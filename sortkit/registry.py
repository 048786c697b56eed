"""
Registry of the sorting algorithms: a stable name for each one, its display
label, and the sort function for a given backend.

Every sort function has the signature ``sort(A, first, last)`` and sorts the
half-open range A[first:last] in place.
"""

import collections
import logging
import warnings

import numpy as np

from sortkit import config
from sortkit.errors import (SortkitWarning, UnknownAlgorithmError,
                            UnknownBackendError, UnsupportedSequenceError)


logger = logging.getLogger(__name__)


Algorithm = collections.namedtuple('Algorithm',
                                   ('name', 'label', 'family', 'slow'))


def _quicksort_label(scheme, pivot, form):
    return "Quicksort (%s partitioning, %s pivot, %s)" % (scheme, pivot, form)


ALGORITHMS = collections.OrderedDict((a.name, a) for a in [
    Algorithm('insertion_sort', "Insertion sort", 'elementary', True),
    Algorithm('selection_sort', "Selection sort", 'elementary', True),
    Algorithm('bubble_sort', "Bubble sort", 'elementary', True),
    Algorithm('bubble_sort_nonadaptive', "Bubble sort (non-adaptive)",
              'elementary', True),
    Algorithm('bubble_sort_adaptive', "Bubble sort (max-adaptive)",
              'elementary', True),
    Algorithm('gnome_sort', "Gnome sort", 'elementary', True),
    Algorithm('shellsort_hibbard', "Shellsort (Hibbard gap sequence)",
              'shellsort', False),
    Algorithm('shellsort_3smooth', "Shellsort (3-smooth gap sequence)",
              'shellsort', False),
    Algorithm('shellsort_sedgewick', "Shellsort (Sedgewick gap sequence)",
              'shellsort', False),
    Algorithm('shellsort_tokuda', "Shellsort (Tokuda gap sequence)",
              'shellsort', False),
    Algorithm('shellsort_quasi_ciura',
              "Shellsort (Extended Ciura gap sequence)", 'shellsort', False),
    Algorithm('mergesort_topdown', "Mergesort (top-down, recursive)",
              'mergesort', False),
    Algorithm('mergesort_topdown_iterative', "Mergesort (top-down, iterative)",
              'mergesort', False),
    Algorithm('mergesort_bottomup', "Mergesort (bottom-up, iterative)",
              'mergesort', False),
    Algorithm('heapsort', "Heapsort", 'heapsort', False),
    Algorithm('heapsort_swapping', "Heapsort (swapping sift-down)",
              'heapsort', False),
    Algorithm('quicksort_lomuto_simple',
              _quicksort_label("Lomuto", "middle-element", "recursive"),
              'quicksort', False),
    Algorithm('quicksort_lomuto_simple_iterative',
              _quicksort_label("Lomuto", "middle-element", "iterative"),
              'quicksort', False),
    Algorithm('quicksort_lomuto',
              _quicksort_label("Lomuto", "median-of-three", "recursive"),
              'quicksort', False),
    Algorithm('quicksort_lomuto_iterative',
              _quicksort_label("Lomuto", "median-of-three", "iterative"),
              'quicksort', False),
    Algorithm('quicksort_hoare_simple',
              _quicksort_label("Hoare", "middle-element", "recursive"),
              'quicksort', False),
    Algorithm('quicksort_hoare_simple_iterative',
              _quicksort_label("Hoare", "middle-element", "iterative"),
              'quicksort', False),
    Algorithm('quicksort_hoare',
              _quicksort_label("Hoare", "median-of-three", "recursive"),
              'quicksort', False),
    Algorithm('quicksort_hoare_iterative',
              _quicksort_label("Hoare", "median-of-three", "iterative"),
              'quicksort', False),
    Algorithm('library_heapsort', "Library heapsort (heapq, numpy heapsort)",
              'library', False),
    Algorithm('library_stable_sort',
              "Library stable sort (sorted, numpy stable sort)",
              'library', False),
    Algorithm('library_sort', "Library sort (list.sort, numpy introsort)",
              'library', False),
])


# Built implementations, keyed by backend
_implementations = {}


def _build_implementations(backend):
    """
    Instantiate every algorithm family for *backend*.  With the 'jit'
    backend nothing is compiled yet: numba compiles each function on its
    first call, for the argument types of that call.
    """
    from sortkit.algorithms import (elementary, shellsort, mergesort,
                                    heapsort, quicksort, library)

    logger.debug("building %s implementations", backend)
    if backend == 'python':
        impls = {
            'elementary': elementary.make_py_elementary(),
            'shellsort': shellsort.make_py_shellsort(),
            'mergesort': mergesort.make_py_mergesort(
                mergesort.make_temp_list),
            'heapsort': heapsort.make_py_heapsort(),
            'quicksort': quicksort.make_py_quicksort(),
        }
    else:
        impls = {
            'elementary': elementary.make_jit_elementary(),
            'shellsort': shellsort.make_jit_shellsort(),
            'mergesort': mergesort.make_jit_mergesort(
                mergesort.make_temp_array),
            'heapsort': heapsort.make_jit_heapsort(),
            'quicksort': quicksort.make_jit_quicksort(),
        }
    impls['library'] = library
    return impls


def _get_implementations(backend):
    try:
        return _implementations[backend]
    except KeyError:
        impls = _implementations[backend] = _build_implementations(backend)
        return impls


def _resolve_backend(backend):
    if backend is None:
        backend = config.BACKEND
    if backend not in config.BACKENDS:
        raise UnknownBackendError(backend, config.BACKENDS)
    if backend == 'jit' and config.DISABLE_JIT:
        warnings.warn("JIT compilation is disabled, using the 'python' "
                      "backend instead", SortkitWarning)
        backend = 'python'
    return backend


def get_algorithm(name):
    """
    Return the Algorithm record registered under *name*.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(name, ALGORITHMS)


def get_sort(name, backend=None):
    """
    Return the sort function registered under *name* for *backend*
    ('python' or 'jit', defaulting to config.BACKEND).
    """
    return _lookup(get_algorithm(name), _resolve_backend(backend))


def _lookup(algo, backend):
    impls = _get_implementations(backend)
    return getattr(impls[algo.family], algo.name)


def algorithm_names(include_slow=True, include_library=True):
    """
    Return the registered names, in registration order.
    """
    return [a.name for a in ALGORITHMS.values()
            if (include_slow or not a.slow)
            and (include_library or a.family != 'library')]


def sort(A, algorithm='quicksort_hoare', first=0, last=None, backend=None):
    """
    Sort A[first:last] in place with the named algorithm.

    Without an explicit *backend*, numpy arrays are sorted by JIT compiled
    code (unless disabled in the config) and anything else by pure Python.
    The 'jit' backend only takes numpy arrays.
    """
    algo = get_algorithm(algorithm)
    if last is None:
        last = len(A)
    if not 0 <= first <= last <= len(A):
        raise ValueError("invalid range [%d, %d) for a sequence of length %d"
                         % (first, last, len(A)))
    if backend is None:
        if isinstance(A, np.ndarray) and not config.DISABLE_JIT:
            backend = 'jit'
        else:
            backend = 'python'
    backend = _resolve_backend(backend)
    if backend == 'jit' and not isinstance(A, np.ndarray):
        raise UnsupportedSequenceError(type(A), backend)
    _lookup(algo, backend)(A, first, last)
