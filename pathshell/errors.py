"""Exceptions raised by the shell core."""


class ShellError(Exception):
    """Base class for errors reported to the user and survived by the loop."""


class ParseError(ShellError):
    """Malformed line or pipeline syntax."""


class EmptyInput(ParseError):
    """The line held no tokens. Nothing to do."""


class NotFound(ShellError, LookupError):
    """An entry was not found in the PathList."""


class ResolutionError(NotFound):
    """A command name did not resolve to an executable."""

    def __init__(self, name):
        super().__init__(f"{name}: command not found")
        self.name = name


class ResourceError(ShellError):
    """A pipe or a process could not be created."""


class ChildExecError(ShellError):
    """A spawned stage failed to exec its program."""


class BuiltinSyntaxError(ShellError):
    """Malformed arguments to a built-in command."""


class ExitRequested(Exception):
    """Raised by the exit built-in to stop the read-eval loop."""
