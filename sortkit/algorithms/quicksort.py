"""
Quicksort with interchangeable partition schemes and pivot choices.

Two partition schemes (Lomuto, Hoare) times two pivot choices (middle
element, median of three), each sort both recursive and iterative with an
explicit stack of pending intervals.  Every partition takes its pivot from
A[first]; the pivot choice swaps the chosen element there beforehand.
"""

import collections


QuicksortImplementation = collections.namedtuple(
    'QuicksortImplementation',
    (# The compile function itself
     'compile',
     # All subroutines exercised by the tests
     'median_of_three', 'bring_mid_to_front',
     'bring_median_of_three_to_front',
     'partition_lomuto', 'partition_hoare',
     # The top-level functions
     'quicksort_lomuto_simple', 'quicksort_lomuto_simple_iterative',
     'quicksort_lomuto', 'quicksort_lomuto_iterative',
     'quicksort_hoare_simple', 'quicksort_hoare_simple_iterative',
     'quicksort_hoare', 'quicksort_hoare_iterative',
     ))


def make_quicksort_impl(wrap, lt=None):

    def default_lt(a, b):
        """
        Trivial comparison function between two keys.
        """
        return a < b

    LT = wrap(lt if lt is not None else default_lt)

    @wrap
    def median_of_three(A, p, q, r):
        """
        Return whichever of the indices p, q, r holds the median of the
        three keys.
        """
        if LT(A[p], A[q]):
            if LT(A[p], A[r]):
                # p is the smallest, the median is the smaller of q and r
                return r if LT(A[r], A[q]) else q
            return p
        if LT(A[q], A[r]):
            # q is the smallest, the median is the smaller of p and r
            return r if LT(A[r], A[p]) else p
        return q

    @wrap
    def bring_mid_to_front(A, first, last):
        mid = first + (last - first) // 2
        A[first], A[mid] = A[mid], A[first]

    @wrap
    def bring_median_of_three_to_front(A, first, last):
        mid = first + (last - first) // 2
        m = median_of_three(A, first, mid, last - 1)
        A[first], A[m] = A[m], A[first]

    @wrap
    def partition_lomuto(A, first, last):
        """
        Partition the nonempty A[first:last] around the pivot A[first].
        The pivot's final index *mid* is returned: everything in
        A[first:mid] is less than the pivot, everything in
        A[mid + 1:last] is not.
        """
        assert last > first
        pivot = A[first]
        mid = first
        for cur in range(first + 1, last):
            if LT(A[cur], pivot):
                mid += 1
                A[mid], A[cur] = A[cur], A[mid]
        A[first], A[mid] = A[mid], A[first]
        return mid

    @wrap
    def partition_hoare(A, first, last):
        """
        Partition A[first:last] around the pivot A[first] with two cursors
        closing in from both ends.  The boundary *b* is returned, with
        first < b < last: nothing in A[first:b] is greater than the pivot,
        nothing in A[b:last] is less.  The pivot itself can end up on
        either side.

        The scans need no bounds checks.  The first left scan stops on the
        pivot itself and the first right scan stops there at the latest;
        after every swap both cursors have a stopper ahead of them.
        """
        assert last - first >= 3
        pivot = A[first]
        i = first - 1
        j = last
        while True:
            i += 1
            while LT(A[i], pivot):
                i += 1
            j -= 1
            while LT(pivot, A[j]):
                j -= 1
            if i >= j:
                return j + 1
            A[i], A[j] = A[j], A[i]

    @wrap
    def sort_two(A, first):
        if LT(A[first + 1], A[first]):
            A[first], A[first + 1] = A[first + 1], A[first]

    def make_lomuto_quicksorts(select_pivot):

        @wrap
        def quicksort(A, first, last):
            if last - first < 2:
                return
            select_pivot(A, first, last)
            mid = partition_lomuto(A, first, last)
            quicksort(A, first, mid)
            quicksort(A, mid + 1, last)

        @wrap
        def quicksort_iterative(A, first, last):
            intervals = [(first, last)]
            while len(intervals) > 0:
                first, last = intervals.pop()
                if last - first < 2:
                    continue
                select_pivot(A, first, last)
                mid = partition_lomuto(A, first, last)
                # Push the right part first so the left one is sorted first
                intervals.append((mid + 1, last))
                intervals.append((first, mid))

        return quicksort, quicksort_iterative

    def make_hoare_quicksorts(select_pivot):

        @wrap
        def quicksort(A, first, last):
            if last - first < 2:
                return
            if last - first == 2:
                sort_two(A, first)
                return
            select_pivot(A, first, last)
            mid = partition_hoare(A, first, last)
            quicksort(A, first, mid)
            quicksort(A, mid, last)

        @wrap
        def quicksort_iterative(A, first, last):
            intervals = [(first, last)]
            while len(intervals) > 0:
                first, last = intervals.pop()
                if last - first < 2:
                    continue
                if last - first == 2:
                    sort_two(A, first)
                    continue
                select_pivot(A, first, last)
                mid = partition_hoare(A, first, last)
                intervals.append((mid, last))
                intervals.append((first, mid))

        return quicksort, quicksort_iterative

    lomuto_simple = make_lomuto_quicksorts(bring_mid_to_front)
    lomuto = make_lomuto_quicksorts(bring_median_of_three_to_front)
    hoare_simple = make_hoare_quicksorts(bring_mid_to_front)
    hoare = make_hoare_quicksorts(bring_median_of_three_to_front)

    return QuicksortImplementation(wrap,
                                   median_of_three, bring_mid_to_front,
                                   bring_median_of_three_to_front,
                                   partition_lomuto, partition_hoare,
                                   lomuto_simple[0], lomuto_simple[1],
                                   lomuto[0], lomuto[1],
                                   hoare_simple[0], hoare_simple[1],
                                   hoare[0], hoare[1])


def make_py_quicksort(*args, **kwargs):
    return make_quicksort_impl((lambda f: f), *args, **kwargs)

def make_jit_quicksort(*args, **kwargs):
    from numba import njit
    return make_quicksort_impl((lambda f: njit(f)), *args, **kwargs)
