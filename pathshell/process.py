"""Inspect the controller's open descriptors and children with psutil."""
import os
from dataclasses import dataclass, field

import psutil


def open_descriptor_count(pid=None):
    return psutil.Process(pid or os.getpid()).num_fds()


def child_pids(pid=None):
    """Pids of the direct children of pid, zombies included."""
    try:
        children = psutil.Process(pid or os.getpid()).children()
    except psutil.NoSuchProcess:
        return []
    return sorted(c.pid for c in children)


@dataclass
class ProcessSnapshot:
    fds: int
    children: list = field(default_factory=list)

    @classmethod
    def take(cls, pid=None):
        return cls(open_descriptor_count(pid), child_pids(pid))

    def leaked_since(self, before):
        """
        Compare with an earlier snapshot.
        Returns: (extra descriptor count, pids of new children)
        """
        new_children = [p for p in self.children if p not in before.children]
        return max(self.fds - before.fds, 0), new_children
