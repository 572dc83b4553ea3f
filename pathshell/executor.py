import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from pathshell import config
from pathshell.errors import ChildExecError, NotFound, ResourceError
from pathshell.process import ProcessSnapshot
from pathshell.signals import ignore_interrupts, restore_child_signals

logger = logging.getLogger(__name__)


@dataclass
class Wiring:
    """Descriptors a stage gets as stdin/stdout. None keeps the inherited one."""
    stdin: Optional[int] = None
    stdout: Optional[int] = None


def open_channels(count):
    """
    Create every pipe of a pipeline up front.
    Returns: list of (read_fd, write_fd)
    Raises: ResourceError, after closing the pipes already made
    """
    channels = []
    try:
        for _ in range(count):
            channels.append(os.pipe())
    except OSError as e:
        close_channels(channels)
        raise ResourceError(f"pipe: {e.strerror}") from e
    return channels


def close_channels(channels):
    for read_fd, write_fd in channels:
        for fd in (read_fd, write_fd):
            try:
                os.close(fd)
            except OSError:
                pass


def plan_wiring(stage_count, channels):
    """
    Stage i reads channel i-1 and writes channel i.
    The first stage keeps stdin, the last keeps stdout.
    """
    plan = []
    for i in range(stage_count):
        plan.append(Wiring(
            stdin=channels[i - 1][0] if i > 0 else None,
            stdout=channels[i][1] if i < stage_count - 1 else None,
        ))
    return plan


def _child_report(message):
    # Straight to fd 2, the child's Python-level streams may be redirected
    os.write(2, f"{config.SHELL_NAME}: {message}\n".encode(errors="replace"))


def exec_stage(stage, wiring, channels, path_list):
    """Body of a forked child. Never returns."""
    status = config.EXIT_EXEC_FAILED
    try:
        if wiring.stdin is not None:
            os.dup2(wiring.stdin, 0)
        if wiring.stdout is not None:
            os.dup2(wiring.stdout, 1)
        close_channels(channels)
        restore_child_signals()

        program = path_list.resolve(stage.name)
        try:
            os.execv(program, stage.argv)
        except OSError as e:
            raise ChildExecError(f"{stage.name}: {e.strerror}") from e
        except ValueError as e:
            raise ChildExecError(f"{stage.name!r}: {e}") from e
    except NotFound as e:
        status = config.EXIT_NOT_FOUND
        _child_report(e)
    except ChildExecError as e:
        _child_report(e)
    except OSError as e:
        _child_report(f"{stage.name}: {e.strerror}")
    finally:
        os._exit(status)


def spawn_stage(stage, wiring, channels, path_list):
    """
    Fork one stage.
    Returns: pid of the child
    """
    try:
        pid = os.fork()
    except OSError as e:
        raise ResourceError(f"fork: {stage.name}: {e.strerror}") from e

    if pid == 0:
        exec_stage(stage, wiring, channels, path_list)
    return pid


def exit_status(code):
    # waitstatus_to_exitcode gives -N for a child killed by signal N
    return code if code >= 0 else 128 - code


def wait_for_children():
    """
    Reap children in whatever order they finish until none is left.
    Returns: dict pid -> exit status
    """
    statuses = {}
    with ignore_interrupts():
        while True:
            try:
                pid, status = os.waitpid(-1, 0)
            except ChildProcessError:
                break
            statuses[pid] = exit_status(os.waitstatus_to_exitcode(status))
            logger.debug("child %d exited with %d", pid, statuses[pid])
    return statuses


def execute_pipeline(pipeline, path_list):
    """
    Execute a foreground pipeline and wait for all of its stages.
    Returns: exit status of the last stage
    Raises: ResourceError if a pipe or a process could not be created;
            children already started are reaped first
    """
    before = ProcessSnapshot.take() if config.CHECK_LEAKS else None

    # Buffered output would otherwise be copied into every child
    sys.stdout.flush()
    sys.stderr.flush()

    channels = open_channels(pipeline.channel_count)
    plan = plan_wiring(len(pipeline.stages), channels)
    pids = []

    # Children reset SIGINT before exec, so only the controller ignores it
    with ignore_interrupts():
        try:
            for stage, wiring in zip(pipeline.stages, plan):
                pid = spawn_stage(stage, wiring, channels, path_list)
                pids.append(pid)
                logger.debug("started %s as pid %d", stage.argv, pid)
        finally:
            # The children own the pipes now; an open write end here blocks EOF
            close_channels(channels)
            statuses = wait_for_children()

    if before is not None:
        _check_leaks(before)

    return statuses.get(pids[-1], 0)


def _check_leaks(before):
    extra_fds, new_children = ProcessSnapshot.take().leaked_since(before)
    if extra_fds:
        logger.warning("%d descriptor(s) left open after pipeline", extra_fds)
    if new_children:
        logger.warning("children left after pipeline: %s", new_children)
