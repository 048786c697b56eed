import io
import unittest
from unittest import mock

import numpy as np

from sortkit import bench
from .support import TestCase, override_config


def broken_sort(A, first, last):
    # Reverses instead of sorting
    A[first:last] = A[first:last][::-1]


class TestBench(TestCase):

    def test_is_sorted(self):
        self.assertTrue(bench.is_sorted([]))
        self.assertTrue(bench.is_sorted([5]))
        self.assertTrue(bench.is_sorted([1, 1, 2, 3]))
        self.assertFalse(bench.is_sorted([1, 3, 2]))
        self.assertTrue(bench.is_sorted([9, 1, 2, 3, 0], 1, 4))
        self.assertTrue(bench.is_sorted(np.arange(10)))

    def test_make_datasets(self):
        datasets = bench.make_datasets((5, 50), seed=3, backend='python')
        self.assertEqual(len(datasets), len(bench.FIXED_DATASETS) + 2)
        for d, fixed in zip(datasets, bench.FIXED_DATASETS):
            self.assertEqual(d, list(fixed))
        self.assertEqual([len(d) for d in datasets[-2:]], [5, 50])
        for d in datasets:
            self.assertIsInstance(d, list)

        arrays = bench.make_datasets((5, 50), seed=3, backend='jit')
        for a, d in zip(arrays, datasets):
            self.assertIsInstance(a, np.ndarray)
            self.assertEqual(a.dtype, np.int64)
            self.assertEqual(a.tolist(), d)

    def test_make_datasets_seeded(self):
        a = bench.make_datasets((100,), seed=7, backend='python')
        b = bench.make_datasets((100,), seed=7, backend='python')
        c = bench.make_datasets((100,), seed=8, backend='python')
        self.assertEqual(a, b)
        self.assertNotEqual(a[-1], c[-1])

    def test_generate_range(self):
        keys = bench.generate(10000, np.random.RandomState(0))
        info = np.iinfo(np.int32)
        self.assertTrue(np.all(keys >= info.min))
        self.assertTrue(np.all(keys <= info.max))

    def test_format_sequence(self):
        self.assertEqual(bench.format_sequence([]), "[]")
        self.assertEqual(bench.format_sequence([3, -1]), "[3, -1]")

    def test_run_one(self):
        data = self.random_list(300)
        res = bench.run_one('quicksort_hoare', data, backend='python',
                            warmup=True)
        self.assertTrue(res.ok)
        self.assertEqual(res.size, 300)
        self.assertEqual(res.output, sorted(data))
        self.assertGreaterEqual(res.elapsed, 0)
        # The input is left alone
        self.assertEqual(data, self.random_list(300))

    def test_run_one_failure(self):
        with mock.patch('sortkit.bench.get_sort', return_value=broken_sort):
            with self.assertLogs('sortkit.bench', level='WARNING'):
                res = bench.run_one('heapsort', [1, 2, 3], backend='python')
        self.assertFalse(res.ok)

    def test_run_battery_report(self):
        stream = io.StringIO()
        datasets = [[111, 333, 222], []]
        results = bench.run_battery(datasets, ['heapsort', 'mergesort_topdown'],
                                    backend='python', stream=stream)
        self.assertEqual(len(results), 4)
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "3-element vector [111, 333, 222].")
        self.assertRegex(lines[1], r"^Heapsort: \d+ms \[111, 222, 333\] OK\.$")
        self.assertRegex(lines[2], r"^Mergesort \(top-down, recursive\): "
                                   r"\d+ms \[111, 222, 333\] OK\.$")
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "0-element vector [].")

    def test_run_battery_long_data(self):
        stream = io.StringIO()
        data = self.random_list(50)
        with override_config('PRINT_THRESHOLD', 20):
            bench.run_battery([data], ['library_sort'], backend='python',
                              stream=stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "50-element vector.")
        self.assertRegex(lines[1], r"^Library sort .*: \d+ms OK\.$")

    def test_run_battery_skips_slow(self):
        stream = io.StringIO()
        datasets = [self.random_list(10), self.random_list(30)]
        with self.assertLogs('sortkit.bench', level='INFO') as logs:
            results = bench.run_battery(datasets,
                                        ['bubble_sort', 'heapsort'],
                                        backend='python', slow_threshold=20,
                                        stream=stream)
        self.assertEqual([(r.name, r.size) for r in results],
                         [('bubble_sort', 10), ('heapsort', 10),
                          ('heapsort', 30)])
        self.assertIn("skipping bubble_sort", "\n".join(logs.output))

    def test_run_battery_reports_failure(self):
        stream = io.StringIO()
        with mock.patch('sortkit.bench.get_sort', return_value=broken_sort):
            with self.assertLogs('sortkit.bench', level='WARNING'):
                results = bench.run_battery([[1, 2, 3]], ['heapsort'],
                                            backend='python', stream=stream)
        self.assertFalse(results[0].ok)
        self.assertIn("[3, 2, 1] FAIL!!!", stream.getvalue())


class TestBenchJit(TestCase):

    _sortkit_jit_test_ = True

    def test_run_battery(self):
        stream = io.StringIO()
        datasets = bench.make_datasets((1000,), seed=1, backend='jit')
        results = bench.run_battery(datasets,
                                    ['shellsort_tokuda', 'quicksort_hoare',
                                     'library_heapsort'],
                                    backend='jit', stream=stream)
        self.assertTrue(all(r.ok for r in results))
        self.assertNotIn("FAIL", stream.getvalue())


if __name__ == '__main__':
    unittest.main()
