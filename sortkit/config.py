import logging
import os
import warnings

# YAML needed to use file based sortkit config
try:
    import yaml
    _HAVE_YAML = True
except ImportError:
    _HAVE_YAML = False


# this is the name of the user supplied configuration file
_config_fname = '.sortkit_config.yaml'

BACKENDS = ('python', 'jit')


def _parse_optional_int(text):
    """
    Parse an integer setting where an empty string or "none" means unset.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text or text.lower() == 'none':
        return None
    return int(text)


def _parse_log_level(text):
    name = str(text).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError("unknown logging level %r" % (text,))
    return name


def _parse_backend(text):
    name = str(text).strip().lower()
    if name not in BACKENDS:
        raise ValueError("SORTKIT_BACKEND must be one of %s" % (BACKENDS,))
    return name


class _EnvReloader(object):

    def __init__(self):
        self.reset()

    def reset(self):
        self.old_environ = {}
        self.update(force=True)

    def update(self, force=False):
        new_environ = {}

        # first check if there's a .sortkit_config.yaml and use values from it
        if os.path.exists(_config_fname) and os.path.isfile(_config_fname):
            if not _HAVE_YAML:
                msg = ("A sortkit config file is found but YAML parsing "
                       "capabilities appear to be missing. "
                       "To use this feature please install `pyyaml`. e.g. "
                       "`pip install pyyaml`.")
                warnings.warn(msg)
            else:
                with open(_config_fname, 'rt') as f:
                    y_conf = yaml.safe_load(f)
                if y_conf is not None:
                    for k, v in y_conf.items():
                        new_environ['SORTKIT_' + k.upper()] = v

        # clobber file based config with any locally defined env vars
        for name, value in os.environ.items():
            if name.startswith('SORTKIT_'):
                new_environ[name] = value
        # We update the config variables if at least one SORTKIT environment
        # variable was modified.  This lets the user modify values
        # directly in the config module without having them overwritten
        # until reload_config() is called.
        if force or self.old_environ != new_environ:
            self.process_environ(new_environ)
            # Store a copy
            self.old_environ = dict(new_environ)

    def process_environ(self, environ):
        def _readenv(name, ctor, default):
            value = environ.get(name)
            if value is None:
                return default() if callable(default) else default
            try:
                return ctor(value)
            except Exception:
                warnings.warn("environ %s defined but failed to parse '%s'" %
                              (name, value), RuntimeWarning)
                return default() if callable(default) else default

        # Show sortkit warnings
        #   0 = sortkit warnings suppressed (default)
        #   1 = all sortkit warnings shown
        WARNINGS = _readenv("SORTKIT_WARNINGS", int, 0)

        # Never compile with numba; every sort runs as plain Python
        DISABLE_JIT = _readenv("SORTKIT_DISABLE_JIT", int, 0)

        # Default backend for the harness and for sortkit.sort() on arrays
        BACKEND = _readenv("SORTKIT_BACKEND", _parse_backend,
                           'python' if DISABLE_JIT else 'jit')
        if DISABLE_JIT:
            BACKEND = 'python'

        # Datasets longer than this skip the O(n^2) algorithms
        SLOW_THRESHOLD = _readenv("SORTKIT_SLOW_THRESHOLD", int, 100000)

        # Sequences up to this length are echoed by the harness
        PRINT_THRESHOLD = _readenv("SORTKIT_PRINT_THRESHOLD", int, 20)

        # Seed of the random datasets, None draws fresh entropy
        SEED = _readenv("SORTKIT_SEED", _parse_optional_int, None)

        # Compile jit algorithms on a tiny input before timing them
        WARMUP = _readenv("SORTKIT_WARMUP", int, 1)

        # Any level name from the *logging* module.  Case insensitive.
        LOG_LEVEL = _readenv("SORTKIT_LOG_LEVEL", _parse_log_level, "WARNING")

        # Inject the configuration values into the module globals
        for name, value in locals().copy().items():
            if name.isupper():
                globals()[name] = value

        # delay this until now, let the globals for the module be updated
        # prior to loading sortkit.errors
        from sortkit.errors import SortkitWarning
        if WARNINGS == 0:
            warnings.simplefilter('ignore', SortkitWarning)
        else:
            warnings.simplefilter('default', SortkitWarning)


_env_reloader = _EnvReloader()


def reload_config():
    """
    Reload the configuration from environment variables, if necessary.
    """
    _env_reloader.update()
