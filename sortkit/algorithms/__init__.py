"""
The sorting algorithms.  Each family module provides a make_*_impl()
factory plus its pure Python (make_py_*) and JIT compiled (make_jit_*)
flavours.
"""
