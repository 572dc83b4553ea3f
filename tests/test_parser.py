import pytest

from pathshell import config
from pathshell.errors import EmptyInput, ParseError
from pathshell.parser import default_delimiters, parse_pipeline, split_pipeline, tokenize


def test_tokenize_splits_on_any_delimiter():
    assert tokenize("ls  -l\t/tmp\n") == ["ls", "-l", "/tmp"]


def test_tokenize_has_no_token_limit():
    line = " ".join(str(i) for i in range(500))
    assert len(tokenize(line)) == 500


@pytest.mark.parametrize("line", ["", "   ", "\t\n", " \t \n "])
def test_tokenize_blank_line_is_empty_input(line):
    with pytest.raises(EmptyInput):
        tokenize(line)


def test_empty_input_is_a_parse_error():
    assert issubclass(EmptyInput, ParseError)


def test_quotes_and_backslashes_are_literal():
    assert tokenize('echo "a b" it\\s') == ["echo", '"a', 'b"', "it\\s"]


def test_hash_is_not_a_comment():
    assert tokenize("echo #not-a-comment") == ["echo", "#not-a-comment"]


def test_quote_characters_as_extra_delimiters():
    assert tokenize("echo \"hi\" 'there'", " \"'") == ["echo", "hi", "there"]


def test_split_on_quotes_setting(monkeypatch):
    monkeypatch.setattr(config, "SPLIT_ON_QUOTES", True)
    assert '"' in default_delimiters()
    assert tokenize('echo "hi"') == ["echo", "hi"]


def test_split_pipeline_keeps_every_segment():
    assert split_pipeline("a | b|c") == ["a ", " b", "c"]
    assert split_pipeline("a") == ["a"]


def test_parse_pipeline_tokenizes_each_stage():
    pipeline = parse_pipeline("echo hi | tr h H")
    assert [s.argv for s in pipeline.stages] == [["echo", "hi"], ["tr", "h", "H"]]
    assert pipeline.channel_count == 1
    assert pipeline.first.name == "echo"


def test_parse_single_stage_has_no_channel():
    pipeline = parse_pipeline("ls -l")
    assert len(pipeline.stages) == 1
    assert pipeline.channel_count == 0


def test_parse_pipeline_leaves_line_untouched():
    line = "cat a | wc -l"
    parse_pipeline(line)
    assert line == "cat a | wc -l"


@pytest.mark.parametrize("line", ["ls |", "| wc", "a || b", "a |  | b"])
def test_empty_stage_is_a_syntax_error(line):
    with pytest.raises(ParseError) as excinfo:
        parse_pipeline(line)
    assert not isinstance(excinfo.value, EmptyInput)


def test_blank_line_is_empty_input():
    with pytest.raises(EmptyInput):
        parse_pipeline("   ")
