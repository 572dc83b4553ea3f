import logging
import os
import signal
import sys

from pathshell import config
from pathshell.builtin import execute_builtin, is_builtin, report
from pathshell.errors import EmptyInput, ExitRequested, ParseError, ShellError
from pathshell.executor import execute_pipeline
from pathshell.parser import parse_pipeline
from pathshell.pathlist import PathList

logger = logging.getLogger(__name__)


def default_prompt():
    """Generate shell prompt"""
    if config.PROMPT is not None:
        return config.PROMPT
    user = os.getenv("USER") or os.getenv("USERNAME") or "user"
    try:
        cwd = os.getcwd()
    except FileNotFoundError:
        cwd = "?"
    base = os.path.basename(cwd) or "/"
    return f"{user}@{config.SHELL_NAME}:{base}$ "


def read_input(prompt_text):
    """Read one line from the terminal. Returns None at end of input."""
    try:
        return input(prompt_text)
    except EOFError:
        print()
        return None


class Shell:
    """Read-eval loop owning the PathList for the whole run."""

    def __init__(self, path_list=None, read_line=None, prompt=None):
        self.path_list = path_list if path_list is not None else PathList()
        self.read_line = read_line or read_input
        self.prompt = prompt or default_prompt
        self.last_status = 0

    def run_line(self, line):
        """
        Run one command line: a built-in or a pipeline.
        Returns: False when the loop must stop
        """
        try:
            pipeline = parse_pipeline(line)
            name = pipeline.first.name
            if is_builtin(name):
                if pipeline.channel_count:
                    raise ParseError(f"{name}: built-in cannot be used in a pipeline")
                _, self.last_status = execute_builtin(pipeline.first.argv, self.path_list)
            else:
                self.last_status = execute_pipeline(pipeline, self.path_list)
        except EmptyInput:
            pass
        except ExitRequested:
            self.last_status = 0
            return False
        except ShellError as e:
            report(e)
            self.last_status = 1
        return True

    def main_loop(self):
        """Main shell loop. Returns the interpreter's exit status."""
        while True:
            try:
                line = self.read_line(self.prompt())
            except KeyboardInterrupt:
                # Ctrl+C at the prompt only starts a new line
                print()
                continue

            if line is None:
                break
            try:
                keep_going = self.run_line(line)
            except KeyboardInterrupt:
                # The pipeline was cleaned up; only this line is abandoned
                print()
                self.last_status = 128 + signal.SIGINT
                continue
            if not keep_going:
                break
        return 0


def configure_logging(level=None):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger(config.SHELL_NAME)
    root.setLevel(level or config.LOG_LEVEL)
    if not root.handlers:
        root.addHandler(handler)


def main():
    configure_logging()
    path_list = PathList.from_string(config.INITIAL_PATH)
    logger.debug("initial path: %s", path_list.render())
    return Shell(path_list).main_loop()
