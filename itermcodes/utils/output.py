"""Helpers for writing escape sequences to an output sink.

A sink is any object with a `write(bytes)` method. When no sink is given
the process standard output is used, looked up at call time so that
redirections done after import are honored.
"""
import sys


ENCODING = 'utf-8'


def get_output(out=None):
    """Returns `out`, or the binary standard output when it is `None`."""
    if out is not None:
        return out
    return getattr(sys.stdout, 'buffer', sys.stdout)


def to_bytes(data):
    if isinstance(data, str):
        return data.encode(ENCODING)
    return bytes(data)


def write(data, out=None, flush=True):
    """Writes `data` to the sink in a single call.

    Errors raised by the sink are propagated unchanged.
    """
    out = get_output(out)
    out.write(to_bytes(data))
    if flush and hasattr(out, 'flush'):
        out.flush()
