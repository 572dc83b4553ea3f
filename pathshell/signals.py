import signal
from contextlib import contextmanager


def restore_child_signals():
    """Default SIGINT and SIGPIPE for a child before exec."""
    # Python starts with SIGPIPE ignored and exec keeps ignored signals
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


@contextmanager
def ignore_interrupts():
    """
    Ignore SIGINT in the controller while a foreground pipeline runs.
    The previous disposition comes back on every exit path.
    """
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        # None means the old handler was not installed from Python
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
