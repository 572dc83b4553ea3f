import os

SHELL_NAME = "pathshell"

# Tokenizing
TOKEN_DELIMITERS = " \t\n"
QUOTE_DELIMITERS = "\"'"
PIPE_DELIMITER = "|"
PATH_SEPARATOR = ":"

# Quote characters are never grouping syntax, only optional extra delimiters
SPLIT_ON_QUOTES = os.getenv("PATHSHELL_SPLIT_QUOTES", "") not in ("", "0")

# Colon separated directories loaded into the PathList at startup
INITIAL_PATH = os.getenv("PATHSHELL_PATH", "")

PROMPT = os.getenv("PATHSHELL_PROMPT")

LOG_LEVEL = os.getenv("PATHSHELL_LOG_LEVEL", "WARNING").upper()
CHECK_LEAKS = os.getenv("PATHSHELL_CHECK_LEAKS", "") not in ("", "0")

# Child exit statuses
EXIT_NOT_FOUND = 127
EXIT_EXEC_FAILED = 126
