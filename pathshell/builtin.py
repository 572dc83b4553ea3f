import os
import sys

from pathshell import config
from pathshell.errors import BuiltinSyntaxError, ExitRequested, NotFound, ShellError

PATH_USAGE = "path: usage: path [+ directory | - directory]"


def report(message):
    print(f"{config.SHELL_NAME}: {message}", file=sys.stderr)


def home_directory():
    """Home of the current user, from HOME or the password database."""
    if os.environ.get("HOME") == "":
        # expanduser would turn an empty HOME into "/"
        raise ShellError("cd: no home directory")
    home = os.path.expanduser("~")
    if home == "~" or not home:
        raise ShellError("cd: no home directory")
    return home


def builtin_exit(args):
    if args:
        raise BuiltinSyntaxError("exit: too many arguments")
    raise ExitRequested()


def builtin_cd(args):
    """Change directory"""
    if len(args) > 1:
        raise BuiltinSyntaxError("cd: too many arguments")
    path = args[0] if args else home_directory()
    try:
        os.chdir(path)
        return 0
    except OSError as e:
        report(f"cd: {path}: {e.strerror}")
        return 1
    except ValueError as e:
        report(f"cd: {path!r}: {e}")
        return 1


def builtin_path(args, path_list):
    """Show or edit the search path"""
    if not args:
        rendered = path_list.render()
        if rendered:
            print(rendered)
        return 0

    if len(args) != 2 or args[0] not in ("+", "-"):
        raise BuiltinSyntaxError(PATH_USAGE)

    op, directory = args
    if op == "+":
        path_list.insert_front(directory)
        return 0
    try:
        path_list.remove(directory)
        return 0
    except NotFound as e:
        report(f"path: {e}")
        return 1


BUILTINS = {
    'exit': lambda args, path_list: builtin_exit(args),
    'cd': lambda args, path_list: builtin_cd(args),
    'path': builtin_path,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(tokens, path_list):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)
    Raises: ExitRequested for exit, BuiltinSyntaxError on bad arguments
    """
    if not tokens:
        return False, 0

    cmd = tokens[0]
    args = tokens[1:]

    if cmd in BUILTINS:
        return True, BUILTINS[cmd](args, path_list)

    return False, 0
