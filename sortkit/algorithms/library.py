"""
Library sorts wrapped in the (A, first, last) convention, as baselines for
the harness.  Lists go through the Python standard library, numpy arrays
through ndarray.sort() on a view of the range.
"""

import heapq

import numpy as np


def library_heapsort(A, first, last):
    if isinstance(A, np.ndarray):
        A[first:last].sort(kind='heapsort')
        return
    heap = A[first:last]
    heapq.heapify(heap)
    for i in range(first, last):
        A[i] = heapq.heappop(heap)


def library_stable_sort(A, first, last):
    if isinstance(A, np.ndarray):
        A[first:last].sort(kind='stable')
        return
    A[first:last] = sorted(A[first:last])


def library_sort(A, first, last):
    if isinstance(A, np.ndarray):
        # numpy's 'quicksort' is an introsort
        A[first:last].sort(kind='quicksort')
        return
    part = A[first:last]
    part.sort()
    A[first:last] = part
