import shlex
from dataclasses import dataclass

from pathshell import config
from pathshell.errors import EmptyInput, ParseError


@dataclass
class Stage:
    """One command of a pipeline. argv[0] is the command name."""
    argv: list

    @property
    def name(self):
        return self.argv[0]


@dataclass
class Pipeline:
    stages: list

    @property
    def channel_count(self):
        # N stages are connected by N-1 pipes
        return len(self.stages) - 1

    @property
    def first(self):
        return self.stages[0]


def default_delimiters():
    if config.SPLIT_ON_QUOTES:
        return config.TOKEN_DELIMITERS + config.QUOTE_DELIMITERS
    return config.TOKEN_DELIMITERS


def tokenize(line, delimiters=None):
    """
    Split line on any delimiter character.
    Quotes and backslashes carry no meaning; only delimiters split.
    Returns: list of non-empty tokens
    Raises: EmptyInput if the line holds no token
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace = delimiters or default_delimiters()
    lex.whitespace_split = True
    lex.quotes = ""
    lex.escape = ""
    lex.commenters = ""
    tokens = list(lex)

    if not tokens:
        raise EmptyInput("empty command line")
    return tokens


def split_pipeline(line):
    """Split a raw line into one raw string per pipeline stage."""
    return line.split(config.PIPE_DELIMITER)


def parse_pipeline(line, delimiters=None):
    """
    Parse a command line into pipeline stages.
    Each stage is tokenized on its own after the pipe split.
    Returns: Pipeline
    """
    segments = split_pipeline(line)
    stages = []
    for segment in segments:
        try:
            stages.append(Stage(tokenize(segment, delimiters)))
        except EmptyInput:
            if len(segments) == 1:
                raise
            raise ParseError(
                f"syntax error near '{config.PIPE_DELIMITER}': empty pipeline stage"
            ) from None
    return Pipeline(stages)
