"""
Heapsort over an implicit binary max-heap.

The heap occupies A[first:first + length]; the children of the node at
offset i are at offsets 2 * i + 1 and 2 * i + 2.
"""

import collections


HeapsortImplementation = collections.namedtuple(
    'HeapsortImplementation',
    (# The compile function itself
     'compile',
     # Subroutines exercised by the tests
     'pick_child', 'sift_down', 'sift_down_swapping',
     'make_heap', 'sort_heap',
     # The top-level functions
     'heapsort', 'heapsort_swapping',
     ))


# Returned by pick_child() for a leaf
NO_CHILD = -1


def make_heapsort_impl(wrap, lt=None):

    def default_lt(a, b):
        """
        Trivial comparison function between two keys.
        """
        return a < b

    LT = wrap(lt if lt is not None else default_lt)

    @wrap
    def pick_child(A, first, length, parent):
        """
        Return the offset of the child that may have to move above *parent*:
        the right one if it exists and is not less than the left one,
        otherwise the left one.  NO_CHILD if *parent* is a leaf.
        """
        left = parent * 2 + 1
        if left >= length:
            return NO_CHILD
        right = left + 1
        if right == length or LT(A[first + right], A[first + left]):
            return left
        return right

    @wrap
    def sift_down(A, first, length, parent):
        """
        Restore the heap property below *parent*.  The parent element is
        held aside while bigger children move up, then put down where it
        comes to rest.
        """
        v = A[first + parent]
        while True:
            child = pick_child(A, first, length, parent)
            if child == NO_CHILD or not LT(v, A[first + child]):
                break
            A[first + parent] = A[first + child]
            parent = child
        A[first + parent] = v

    @wrap
    def sift_down_swapping(A, first, length, parent):
        """
        Same as sift_down(), but moving the parent element down one swap
        at a time.
        """
        while True:
            child = pick_child(A, first, length, parent)
            if child == NO_CHILD or not LT(A[first + parent], A[first + child]):
                break
            A[first + parent], A[first + child] = (A[first + child],
                                                   A[first + parent])
            parent = child

    def make_heap_funcs(sift):

        @wrap
        def make_heap(A, first, last):
            """
            Rearrange A[first:last] into a binary max-heap.
            """
            length = last - first
            if length < 2:
                return
            for parent in range(length // 2, -1, -1):
                sift(A, first, length, parent)

        @wrap
        def sort_heap(A, first, last):
            """
            Sort the max-heap A[first:last]: pop each maximum and place it
            just after the shrinking heap.
            """
            length = last - first
            while length > 1:
                length -= 1
                A[first], A[first + length] = A[first + length], A[first]
                sift(A, first, length, 0)

        @wrap
        def heapsort(A, first, last):
            make_heap(A, first, last)
            sort_heap(A, first, last)

        return make_heap, sort_heap, heapsort

    make_heap, sort_heap, heapsort = make_heap_funcs(sift_down)
    heapsort_swapping = make_heap_funcs(sift_down_swapping)[2]

    return HeapsortImplementation(wrap,
                                  pick_child, sift_down, sift_down_swapping,
                                  make_heap, sort_heap,
                                  heapsort, heapsort_swapping)


def make_py_heapsort(*args, **kwargs):
    return make_heapsort_impl((lambda f: f), *args, **kwargs)

def make_jit_heapsort(*args, **kwargs):
    from numba import njit
    return make_heapsort_impl((lambda f: njit(f)), *args, **kwargs)
