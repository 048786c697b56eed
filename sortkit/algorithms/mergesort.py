"""
Three mergesorts over one merge routine: top-down recursive, top-down
iterative (the recursion replayed with an explicit stack) and bottom-up
iterative.

The auxiliary buffer is allocated once per top-level call by the
``make_temp`` function the implementation is built with, and reused by
every merge.  All three sorts are stable.
"""

import collections

import numpy as np


MergesortImplementation = collections.namedtuple(
    'MergesortImplementation',
    (# The compile function itself
     'compile',
     # Subroutines exercised by the tests
     'merge',
     # The top-level functions
     'mergesort_topdown', 'mergesort_topdown_iterative',
     'mergesort_bottomup',
     ))


def make_temp_list(keys, n):
    return [keys[0]] * n

def make_temp_array(keys, n):
    return np.empty(n, keys.dtype)


def make_mergesort_impl(wrap, make_temp, lt=None):

    def default_lt(a, b):
        """
        Trivial comparison function between two keys.
        """
        return a < b

    LT = wrap(lt if lt is not None else default_lt)
    make_temp = wrap(make_temp)

    @wrap
    def merge(A, aux, first1, first2, last2):
        """
        Merge the sorted runs A[first1:first2] and A[first2:last2].
        The merged run is built at the start of *aux* and moved back.
        """
        i = first1
        j = first2
        k = 0
        while i < first2 and j < last2:
            # Take from the left run on ties, which keeps the merge stable
            if LT(A[j], A[i]):
                aux[k] = A[j]
                j += 1
            else:
                aux[k] = A[i]
                i += 1
            k += 1

        # Leftovers, only one of the runs has some
        while i < first2:
            aux[k] = A[i]
            i += 1
            k += 1
        while j < last2:
            aux[k] = A[j]
            j += 1
            k += 1

        for t in range(k):
            A[first1 + t] = aux[t]

    @wrap
    def mergesort_subrange(A, aux, first, last):
        delta = (last - first) // 2
        if delta == 0:
            return
        mid = first + delta
        mergesort_subrange(A, aux, first, mid)
        mergesort_subrange(A, aux, mid, last)
        merge(A, aux, first, mid, last)

    @wrap
    def mergesort_topdown(A, first, last):
        if last - first < 2:
            return
        aux = make_temp(A, last - first)
        mergesort_subrange(A, aux, first, last)

    @wrap
    def mergesort_topdown_iterative(A, first, last):
        """
        Visit the same call tree as mergesort_topdown, in the same order.

        The stack holds the intervals whose halves are not merged yet.  When
        the interval on top has a right half that still needs sorting, the
        (post_first, post_last) marker tells whether we just came back from
        it (merge and retreat) or have yet to go there (descend).
        """
        if last - first < 2:
            return
        aux = make_temp(A, last - first)
        # A "null" interval: nothing has been merged yet
        post_first = last
        post_last = last
        # NOTE: push then pop so that numba can type the empty list
        intervals = [(first, last)]
        intervals.pop()

        while first != last or len(intervals) > 0:
            # Traverse left as far as possible
            while first != last:
                intervals.append((first, last))
                last = first + (last - first) // 2

            first1, last2 = intervals[-1]
            first2 = first1 + (last2 - first1) // 2

            if last2 - first2 >= 2 and (first2 != post_first or
                                        last2 != post_last):
                # The right half needs sorting and we were not just there
                first = first2
                last = last2
            else:
                # Both halves are sorted, merge them and retreat
                merge(A, aux, first1, first2, last2)
                post_first = first1
                post_last = last2
                intervals.pop()

    @wrap
    def mergesort_bottomup(A, first, last):
        n = last - first
        if n < 2:
            return
        aux = make_temp(A, n)
        width = 1
        while width < n:
            # Merge neighbouring blocks of *width* elements; the last block
            # may be shorter, or have no partner at all
            first1 = first
            while first1 + width < last:
                first2 = first1 + width
                last2 = min(first2 + width, last)
                merge(A, aux, first1, first2, last2)
                first1 = last2
            width *= 2

    return MergesortImplementation(wrap, merge,
                                   mergesort_topdown,
                                   mergesort_topdown_iterative,
                                   mergesort_bottomup)


def make_py_mergesort(*args, **kwargs):
    return make_mergesort_impl((lambda f: f), *args, **kwargs)

def make_jit_mergesort(*args, **kwargs):
    from numba import njit
    # NOTE: wrap with njit to allow recursion
    return make_mergesort_impl((lambda f: njit(f)), *args, **kwargs)
