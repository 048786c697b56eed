"""
Elementary O(n**2) sorts: insertion, selection, bubble and gnome sort.

All functions sort the half-open range A[first:last] in place.
"""

import collections


ElementaryImplementation = collections.namedtuple(
    'ElementaryImplementation',
    (# The compile function itself
     'compile',
     # The strided primitive shared with shellsort
     'insertion_sort_gapped',
     # The top-level functions
     'insertion_sort', 'selection_sort',
     'bubble_sort', 'bubble_sort_nonadaptive', 'bubble_sort_adaptive',
     'gnome_sort',
     ))


def make_elementary_impl(wrap, lt=None):

    def default_lt(a, b):
        """
        Trivial comparison function between two keys.
        """
        return a < b

    LT = wrap(lt if lt is not None else default_lt)

    @wrap
    def insertion_sort_gapped(A, first, last, gap):
        """
        Insertion sort of the subsequence A[first:last:gap].
        """
        assert gap > 0
        right = first + gap
        while right < last:
            v = A[right]
            # Insert v into the already sorted A[first:right:gap]
            left = right
            while left > first and LT(v, A[left - gap]):
                A[left] = A[left - gap]
                left -= gap
            A[left] = v
            right += gap

    @wrap
    def insertion_sort(A, first, last):
        insertion_sort_gapped(A, first, last, 1)

    @wrap
    def selection_sort(A, first, last):
        for i in range(first, last - 1):
            smallest = i
            for j in range(i + 1, last):
                if LT(A[j], A[smallest]):
                    smallest = j
            A[i], A[smallest] = A[smallest], A[i]

    @wrap
    def bubble_sort(A, first, last):
        """
        Bubble sort, stopping after the first pass without swaps.
        """
        again = last - first > 1
        while again:
            again = False
            for i in range(first + 1, last):
                if LT(A[i], A[i - 1]):
                    A[i - 1], A[i] = A[i], A[i - 1]
                    again = True

    @wrap
    def bubble_sort_nonadaptive(A, first, last):
        """
        Bubble sort where each pass scans one element less than the previous
        one, whatever the input looks like.
        """
        for end in range(last, first + 1, -1):
            for i in range(first + 1, end):
                if LT(A[i], A[i - 1]):
                    A[i - 1], A[i] = A[i], A[i - 1]

    @wrap
    def bubble_sort_adaptive(A, first, last):
        """
        Bubble sort where each pass stops at the last swap of the previous
        pass: everything after it is already in its final place.
        """
        end = last
        while end - first > 1:
            last_swap = first
            for i in range(first + 1, end):
                if LT(A[i], A[i - 1]):
                    A[i - 1], A[i] = A[i], A[i - 1]
                    last_swap = i
            end = last_swap

    @wrap
    def gnome_sort(A, first, last):
        pos = first + 1
        while pos < last:
            if pos > first and LT(A[pos], A[pos - 1]):
                A[pos - 1], A[pos] = A[pos], A[pos - 1]
                pos -= 1
            else:
                pos += 1

    return ElementaryImplementation(wrap, insertion_sort_gapped,
                                    insertion_sort, selection_sort,
                                    bubble_sort, bubble_sort_nonadaptive,
                                    bubble_sort_adaptive, gnome_sort)


def make_py_elementary(*args, **kwargs):
    return make_elementary_impl((lambda f: f), *args, **kwargs)

def make_jit_elementary(*args, **kwargs):
    from numba import njit
    return make_elementary_impl((lambda f: njit(f)), *args, **kwargs)
