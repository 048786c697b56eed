#!/usr/bin/env python
import runpy
import os

# show sortkit warnings in test mode
os.environ.setdefault('SORTKIT_WARNINGS', '1')


if __name__ == "__main__":
    runpy.run_module('sortkit.runtests', run_name='__main__')
