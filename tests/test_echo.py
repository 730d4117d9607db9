from drills.echo import indexed_lines, indexed_text, join_args, main


def test_join_args_includes_every_argument():
    assert join_args(["prog", "a", "b"]) == "prog a b"


def test_join_args_empty():
    assert join_args([]) == ""


def test_join_args_accepts_generators():
    assert join_args(x for x in ["a", "b", "c"]) == "a b c"


def test_indexed_lines():
    out = indexed_lines(["a", "b", "c"])
    assert out == "index: 0, value: a\nindex: 1, value: b\nindex: 2, value: c\n"


def test_indexed_text():
    out = indexed_text(["a", "b", "c"])
    assert out == "index: 0, value: a\nindex: 1, value: b\nindex: 2, value: c"


def test_indexed_forms_agree():
    args = ["x", "y z", ""]
    assert indexed_lines(args) == indexed_text(args) + "\n"


def test_indexed_empty():
    assert indexed_lines([]) == ""
    assert indexed_text([]) == ""


def test_main_prints_joined_arguments(capsys):
    assert main(["a", "b", "c"]) == 0
    assert capsys.readouterr().out == "a b c\n"


def test_main_without_arguments_prints_empty_line(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "\n"