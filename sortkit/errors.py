"""
Exceptions and warnings raised by sortkit.

The sorting algorithms themselves have no recoverable error path; these
classes cover the outer surfaces (algorithm lookup, backends, configuration).
"""


class SortkitWarning(Warning):
    """
    Base category for all sortkit warnings.
    """


class SortkitError(Exception):
    """
    Base class for all sortkit errors.
    """


class UnknownAlgorithmError(SortkitError):
    """
    An algorithm name that is not in the registry was requested.
    """

    def __init__(self, name, known=()):
        self.name = name
        self.known = tuple(known)
        msg = "unknown sorting algorithm %r" % (name,)
        if self.known:
            msg += " (known: %s)" % ", ".join(self.known)
        super(UnknownAlgorithmError, self).__init__(msg)


class UnknownBackendError(SortkitError):
    """
    A backend other than 'python' or 'jit' was requested.
    """

    def __init__(self, backend, known=()):
        self.backend = backend
        msg = "unknown backend %r" % (backend,)
        if known:
            msg += ", expected one of: %s" % ", ".join(known)
        super(UnknownBackendError, self).__init__(msg)


class UnsupportedSequenceError(SortkitError):
    """
    The sequence type cannot be sorted by the requested backend.
    """

    def __init__(self, seqtype, backend):
        self.seqtype = seqtype
        self.backend = backend
        fmt = ("the {0!r} backend sorts numpy arrays only, got {1}")
        msg = fmt.format(backend, seqtype.__name__)
        super(UnsupportedSequenceError, self).__init__(msg)
