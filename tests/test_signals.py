import signal

import pytest

from pathshell.signals import ignore_interrupts


def test_interrupts_ignored_inside_and_restored_after():
    before = signal.getsignal(signal.SIGINT)
    with ignore_interrupts():
        assert signal.getsignal(signal.SIGINT) == signal.SIG_IGN
    assert signal.getsignal(signal.SIGINT) == before


def test_disposition_restored_on_error():
    before = signal.getsignal(signal.SIGINT)
    with pytest.raises(RuntimeError):
        with ignore_interrupts():
            raise RuntimeError("boom")
    assert signal.getsignal(signal.SIGINT) == before


def test_custom_handler_is_restored():
    def handler(signum, frame):
        pass

    original = signal.signal(signal.SIGINT, handler)
    try:
        with ignore_interrupts():
            pass
        assert signal.getsignal(signal.SIGINT) is handler
    finally:
        signal.signal(signal.SIGINT, original)
