import os

from pathshell.process import ProcessSnapshot, child_pids, open_descriptor_count


def test_descriptor_count_follows_open_and_close():
    before = open_descriptor_count()
    read_fd, write_fd = os.pipe()
    try:
        assert open_descriptor_count() == before + 2
    finally:
        os.close(read_fd)
        os.close(write_fd)
    assert open_descriptor_count() == before


def test_no_children_by_default():
    assert child_pids() == []


def test_leaked_since_reports_only_growth():
    before = ProcessSnapshot(fds=10, children=[1, 2])
    assert ProcessSnapshot(fds=12, children=[1, 2, 7]).leaked_since(before) == (2, [7])
    assert ProcessSnapshot(fds=8, children=[2]).leaked_since(before) == (0, [])


def test_take_describes_current_process():
    snapshot = ProcessSnapshot.take()
    assert snapshot.fds == open_descriptor_count()
    assert snapshot.children == []
