"""
sortkit: in-place comparison sorting algorithms, in pure Python and JIT
compiled with numba, plus a harness benchmarking them.
"""

from sortkit._version import __version__

from sortkit import config, errors
from sortkit.registry import (ALGORITHMS, algorithm_names, get_algorithm,
                              get_sort, sort)

__all__ = ['ALGORITHMS', 'algorithm_names', 'get_algorithm', 'get_sort',
           'sort', 'config', 'errors', '__version__']
