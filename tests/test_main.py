import pytest

from MiniLang_Parser.Main import main, read_source


@pytest.fixture
def write(tmp_path):
    def _write(text, name="prog.pt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


def test_read_source_terminates_every_line(write):
    assert read_source(write("a = 1;\nb = 2;")) == "a = 1;\nb = 2;\n"
    assert read_source(write("")) == ""


def test_parse_prints_tree(write, capsys):
    assert main(["parse", write("x = 1;")]) == 0
    out = capsys.readouterr().out
    assert out == "Program:\n  Statement:\n    Assignment:\n      Identifier: x\n      IntLiteral: 1\n"


def test_parse_empty_file_prints_nothing(write, capsys):
    assert main(["parse", write("")]) == 0
    assert capsys.readouterr().out == ""


def test_tokens_prints_table(write, capsys):
    assert main(["tokens", write("if (a) {}")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Line" in lines[0] and "Column" in lines[0]
    assert len(lines) == 2 + 6
    assert "KEYWORD" in lines[2] and lines[2].endswith("if")


def test_parser_error_exit_status(write, capsys):
    assert main(["parse", write("int add(a, b) {\n    return a + b\n}\n")]) == 1
    err = capsys.readouterr().err
    assert "Parser error: Incorrect syntax: expected ;, found: }" in err


def test_lexer_error_exit_status(write, capsys):
    assert main(["tokens", write("x = 1 @ 2;")]) == 1
    assert "Lexer error: Incorrect token '@' at line 1, col 7" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["parse", str(tmp_path / "nope.pt")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
