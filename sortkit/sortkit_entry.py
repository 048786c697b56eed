import argparse
import logging
import sys


def get_sys_info():
    # delay these imports until now as they are only needed in this
    # function which then exits.
    import platform
    import numpy
    import numba
    from sortkit import config, __version__

    fmt = "%-25s : %-s"
    print("-" * 80)
    print(fmt % ("sortkit version", __version__))
    print(fmt % ("Python version", platform.python_version()))
    print(fmt % ("Python implementation", platform.python_implementation()))
    print(fmt % ("Platform", platform.platform()))
    print(fmt % ("NumPy version", numpy.__version__))
    print(fmt % ("Numba version", numba.__version__))
    print(fmt % ("JIT disabled", bool(config.DISABLE_JIT)))
    print(fmt % ("Default backend", config.BACKEND))
    print("-" * 80)


def make_parser():
    from sortkit import config

    parser = argparse.ArgumentParser(
        prog='sortkit',
        description='Benchmark the sortkit algorithms for correctness '
                    'and wall-clock time')
    parser.add_argument('--backend', choices=config.BACKENDS,
                        default=config.BACKEND,
                        help='run pure Python on lists or JIT compiled '
                             'code on numpy arrays (default: %(default)s)')
    parser.add_argument('--slow-threshold', type=int,
                        default=config.SLOW_THRESHOLD, metavar='N',
                        help='skip the O(n^2) algorithms on datasets longer '
                             'than N (default: %(default)s)')
    parser.add_argument('--sizes', type=int, nargs='+', metavar='N',
                        help='lengths of the random datasets')
    parser.add_argument('--seed', type=int, default=config.SEED,
                        help='seed for the random datasets')
    parser.add_argument('-a', '--algorithm', action='append', dest='names',
                        metavar='NAME',
                        help='only run this algorithm (repeatable)')
    parser.add_argument('--list', action='store_true',
                        help='list the available algorithms and exit')
    parser.add_argument('--no-warmup', action='store_true',
                        help='include JIT compilation in the timings')
    parser.add_argument('-s', '--sysinfo', action='store_true',
                        help='output system information and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debug messages')
    return parser


def main(argv=None):
    from sortkit import bench, config, registry
    from sortkit.errors import SortkitError

    parser = make_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(level=level,
                        format='%(levelname)s:%(name)s:%(message)s')

    if args.sysinfo:
        print("System info:")
        get_sys_info()
        return 0

    if args.list:
        for algo in registry.ALGORITHMS.values():
            print("%-34s %s" % (algo.name, algo.label))
        return 0

    names = args.names or registry.algorithm_names()
    try:
        for name in names:
            registry.get_algorithm(name)
    except SortkitError as e:
        parser.error(str(e))

    sizes = args.sizes if args.sizes is not None else bench.DEFAULT_SIZES
    datasets = bench.make_datasets(sizes, seed=args.seed,
                                   backend=args.backend)
    results = bench.run_battery(datasets, names,
                                backend=args.backend,
                                slow_threshold=args.slow_threshold,
                                warmup=not args.no_warmup)

    failures = [r for r in results if not r.ok]
    if failures:
        print("%d run(s) failed the sortedness check" % len(failures),
              file=sys.stderr)
        return 1
    return 0
