"""
Search list of directories used to resolve command names.

Directories inserted last are searched first. A candidate file qualifies
when it exists and its owner execute bit is set; the check does not ask
whether the current user may actually execute it.
"""
import os
import stat

from pathshell import config
from pathshell.errors import NotFound, ResolutionError


def is_owner_executable(path):
    """True if path exists (following symlinks) with the owner execute bit."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return bool(st.st_mode & stat.S_IXUSR)


class PathList:
    def __init__(self, dirs=()):
        self._dirs = []
        # Seed so that the first given directory is searched first
        for d in reversed(list(dirs)):
            self.insert_front(d)

    @classmethod
    def from_string(cls, value):
        """Build a PathList from a colon separated string."""
        return cls(d for d in value.split(config.PATH_SEPARATOR) if d)

    def insert_front(self, directory):
        self._dirs.insert(0, directory)

    def remove(self, directory):
        """Remove the first entry equal to directory."""
        try:
            self._dirs.remove(directory)
        except ValueError:
            raise NotFound(f"{directory}: not in path") from None

    def resolve(self, name):
        """
        Find the executable for a command name.
        Returns: full path of the first match in search order
        Raises: ResolutionError if nothing matches
        """
        if "/" in name:
            if is_owner_executable(name):
                return name
            raise ResolutionError(name)

        for directory in self._dirs:
            candidate = f"{directory}/{name}"
            if is_owner_executable(candidate):
                return candidate
        raise ResolutionError(name)

    def render(self):
        return config.PATH_SEPARATOR.join(self._dirs)

    def __iter__(self):
        return iter(list(self._dirs))

    def __len__(self):
        return len(self._dirs)

    def __contains__(self, directory):
        return directory in self._dirs

    def __repr__(self):
        return f"PathList({self._dirs!r})"
