from pathshell.pathlist import PathList
from pathshell.shell import Shell, main

__all__ = ["PathList", "Shell", "main"]
