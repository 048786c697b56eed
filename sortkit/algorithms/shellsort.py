"""
Shellsort: diminishing-increment insertion sort over a pluggable gap
sequence.
"""

import collections

from sortkit.algorithms.elementary import make_elementary_impl
from sortkit.algorithms.gaps import make_gaps_impl


ShellsortImplementation = collections.namedtuple(
    'ShellsortImplementation',
    (# The compile function itself
     'compile',
     # Subroutines exercised by the tests
     'gaps', 'insertion_sort_gapped',
     # The top-level functions, one per gap sequence
     'shellsort_hibbard', 'shellsort_3smooth', 'shellsort_sedgewick',
     'shellsort_tokuda', 'shellsort_quasi_ciura',
     ))


def make_shellsort_impl(wrap, lt=None):

    gaps = make_gaps_impl(wrap)
    insertion_sort_gapped = make_elementary_impl(wrap, lt).insertion_sort_gapped

    def make_shellsort(generate_gaps):

        @wrap
        def shellsort(A, first, last):
            gap_list = generate_gaps(last - first)
            assert len(gap_list) == 0 or gap_list[0] == 1

            # All the nonoverlapping gapped insertion sorts, largest gap first
            for k in range(len(gap_list) - 1, -1, -1):
                gap = gap_list[k]
                for start in range(first, first + gap):
                    insertion_sort_gapped(A, start, last, gap)

        return shellsort

    return ShellsortImplementation(wrap, gaps, insertion_sort_gapped,
                                   make_shellsort(gaps.hibbard),
                                   make_shellsort(gaps.three_smooth),
                                   make_shellsort(gaps.sedgewick),
                                   make_shellsort(gaps.tokuda),
                                   make_shellsort(gaps.quasi_ciura))


def make_py_shellsort(*args, **kwargs):
    return make_shellsort_impl((lambda f: f), *args, **kwargs)

def make_jit_shellsort(*args, **kwargs):
    from numba import njit
    return make_shellsort_impl((lambda f: njit(f)), *args, **kwargs)
