import sys
from contextlib import contextmanager


@contextmanager
def recursion_limit(n):
    recursion_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(n)
    try:
        yield
    finally:
        sys.setrecursionlimit(recursion_limit)


def run_logged(io, console):
    result = io.run(console)
    return console.calls, result
