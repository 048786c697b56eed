import sys

from setuptools import find_packages, setup

_version_module = None
try:
    from packaging import version as _version_module
except ImportError:
    try:
        from setuptools._vendor.packaging import version as _version_module
    except ImportError:
        pass


min_python_version = "3.8"
min_numpy_run_version = "1.18"
min_numba_version = "0.55"


def _guard_py_ver():
    if _version_module is None:
        return

    parse = _version_module.parse

    min_py = parse(min_python_version)
    cur_py = parse('.'.join(map(str, sys.version_info[:3])))

    if not min_py <= cur_py:
        msg = ('Cannot install on Python version {}; only versions >={} '
               'are supported.')
        raise RuntimeError(msg.format(cur_py, min_py))


_guard_py_ver()


def get_version():
    # Read the version without importing the package, whose
    # dependencies may not be installed yet
    ns = {}
    with open('sortkit/_version.py') as f:
        exec(f.read(), ns)
    return ns['__version__']


packages = find_packages(include=["sortkit", "sortkit.*"])

install_requires = [
    'numba >={}'.format(min_numba_version),
    'numpy >={}'.format(min_numpy_run_version),
]

metadata = dict(
    name='sortkit',
    description="in-place sorting algorithms in Python and compiled with "
                "Numba, with a benchmark harness",
    version=get_version(),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
    scripts=["bin/sortkit"],
    packages=packages,
    install_requires=install_requires,
    extras_require={
        # file based configuration, see sortkit/config.py
        'yaml': ['pyyaml'],
        'test': ['pytest', 'pyyaml'],
    },
    python_requires=">={}".format(min_python_version),
    license="BSD",
)

with open('README.rst') as f:
    metadata['long_description'] = f.read()

setup(**metadata)
