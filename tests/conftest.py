# tests/conftest.py
"""
Shared fixtures for the pathshell tests.

- system_path: a PathList holding the directories of the real binaries
  used by the pipeline tests (echo, tr, cat, sleep, true, false)
- make_executable: writes files with chosen mode bits into a temporary
  directory, to exercise the owner execute check of PathList.resolve
"""
import os
import shutil

import pytest

from pathshell.pathlist import PathList

SYSTEM_COMMANDS = ("echo", "tr", "cat", "sleep", "true", "false")


@pytest.fixture
def system_path():
    dirs = []
    for name in SYSTEM_COMMANDS:
        found = shutil.which(name)
        if found is None:
            pytest.skip(f"{name} is not installed")
        directory = os.path.dirname(found)
        if directory not in dirs:
            dirs.append(directory)
    return PathList(dirs)


@pytest.fixture
def make_executable(tmp_path):
    """Factory: make_executable(name, mode=0o755, content=...) -> path."""

    def make(name, mode=0o755, content="#!/bin/sh\nexit 0\n", directory=None):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(content)
        os.chmod(path, mode)
        return path

    return make
