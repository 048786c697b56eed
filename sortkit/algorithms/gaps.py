"""
Gap sequences for shellsort.

Each generator takes the length n of the range to sort and returns the
ascending list of its gaps below n.  Whenever n >= 2 the list starts with 1,
so that the last shellsort pass is a plain insertion sort.  For n <= 1 there
is nothing to sort and the list is empty.
"""

import collections
import math


GapsImplementation = collections.namedtuple(
    'GapsImplementation',
    ('compile',
     'hibbard', 'three_smooth', 'sedgewick', 'tokuda', 'quasi_ciura',
     ))

# Names of the generators, in the order the registry lists them
GAP_SEQUENCES = ('hibbard', 'three_smooth', 'sedgewick', 'tokuda',
                 'quasi_ciura')

# This ratio appears in the computations of some of the experimentally
# faster (average-case) gap sequences.
NINE_FOURTHS = 2.25

# Ciura 2001, the fastest known sequence in the average case.  Only these
# terms were found experimentally, there is no formula.
CIURA_GAPS = (1, 4, 10, 23, 57, 132, 301, 701, 1750)


def make_gaps_impl(wrap):

    @wrap
    def hibbard(n):
        """
        One less than the powers of 2 (Hibbard 1963).
        """
        gaps = []
        k = 1
        while True:
            g = (1 << k) - 1
            if g >= n:
                break
            gaps.append(g)
            k += 1
        return gaps

    @wrap
    def three_smooth(n):
        """
        The 3-smooth numbers 2**p * 3**q (Pratt 1971).

        They come out in order from Dijkstra's solution to the Hamming
        problem: every term is twice or thrice an earlier term, so two
        cursors into the terms produced so far track the next candidates.
        """
        gaps = []
        terms = [1]
        two_pos = 0
        three_pos = 0
        while terms[-1] < n:
            gaps.append(terms[-1])
            two_multiple = terms[two_pos] * 2
            three_multiple = terms[three_pos] * 3
            terms.append(min(two_multiple, three_multiple))
            # Both cursors move on a tie (e.g. 6), so no term repeats
            if two_multiple <= three_multiple:
                two_pos += 1
            if three_multiple <= two_multiple:
                three_pos += 1
        return gaps

    @wrap
    def sedgewick(n):
        """
        1, then 4**(i+1) + 3 * 2**i + 1 (Sedgewick 1986, OEIS A036562).
        """
        gaps = []
        if n <= 1:
            return gaps
        gaps.append(1)
        i = 0
        while True:
            g = (1 << ((i + 1) * 2)) + (1 << i) * 3 + 1
            if g >= n:
                break
            gaps.append(g)
            i += 1
        return gaps

    @wrap
    def tokuda(n):
        """
        ceil(h) where h grows by a factor 9/4 plus one (Tokuda 1992,
        OEIS A108870).
        """
        gaps = []
        h = 1.0
        while True:
            g = int(math.ceil(h))
            if g >= n:
                break
            gaps.append(g)
            h = h * NINE_FOURTHS + 1.0
        return gaps

    @wrap
    def quasi_ciura(n):
        """
        Ciura's experimental terms, extended past 1750 by repeatedly
        multiplying by 9/4 and truncating.
        """
        gaps = []
        g = 0
        for h in CIURA_GAPS:
            g = h
            if g >= n:
                return gaps
            gaps.append(g)
        while True:
            g = int(g * NINE_FOURTHS)
            if g >= n:
                break
            gaps.append(g)
        return gaps

    return GapsImplementation(wrap,
                              hibbard, three_smooth, sedgewick, tokuda,
                              quasi_ciura)


def make_py_gaps():
    return make_gaps_impl(lambda f: f)

def make_jit_gaps():
    from numba import njit
    return make_gaps_impl(lambda f: njit(f))


py_gaps = make_py_gaps()
