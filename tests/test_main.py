import io

import main
import tokenizer
from commands import MENU


def interact(text):
    out = io.StringIO()
    main.run_interactive(tokenizer.TokenStream(io.StringIO(text)), out)
    return out.getvalue()


def test_interactive_add_then_exit():
    output = interact("1\n2 2\n1 2\n3 4\n2 2\n1 1\n1 1\n0\n")
    assert output == (
        MENU
        + "Enter size of first matrix:\n"
        + "Enter first matrix:\n"
        + "Enter size of second matrix:\n"
        + "Enter second matrix:\n"
        + "The addition result is:\n"
        + "2.0 3.0\n4.0 5.0\n"
        + "\n"
        + MENU
    )


def test_interactive_determinant():
    output = interact("5\n2 2\n1 2\n3 4\n0\n")
    assert "The result is:\n-2.0\n" in output


def test_interactive_reports_errors_and_continues():
    output = interact("6\n2 2\n1 2\n2 4\n5\n1 1\n3\n0\n")
    assert "ERROR: Impossible to invert matrix with zero determinant\n" in output
    assert "The result is:\n3.0\n" in output


def test_interactive_unknown_choice():
    output = interact("9\n0\n")
    assert "Unknown choice: 9\n" in output
    assert output.count(MENU) == 2


def test_interactive_stops_at_end_of_input():
    output = interact("1\n2 2\n1 2\n")
    assert output.endswith("\n")
    assert "result" not in output


def test_evaluate_writes_output_file(tmp_path, capsys):
    script = tmp_path / "session.txt"
    script.write_text(
        "# transpose along the side diagonal\n"
        "4 2\n"
        "2 3  1 2 3  4 5 6\n"
        "5 3 2 1 2 3 4 5 6   # not square\n"
        "2 1 2 1 2 0.5\n"
        "0\n"
        "1 1 1 1\n"
    )
    path_out = main.evaluate(str(script))
    assert path_out.endswith("session.out")
    with open(path_out) as file:
        assert file.read() == (
            "The result is:\n6.0 3.0\n5.0 2.0\n4.0 1.0\n"
            "The result is:\nNone\n"
            "The multiplication result is:\n0.5 1.0\n"
        )
    assert "Evaluated 3 commands" in capsys.readouterr().out


def test_main_runs_batch_paths(tmp_path):
    script = tmp_path / "inverse.txt"
    script.write_text("6 2 2 1 2 3 4\n")
    main.main([str(script)])
    assert (tmp_path / "inverse.out").read_text() == "The result is:\n-2.0 1.0\n1.5 -0.5\n"


def test_interactive_bad_transpose_choice_consumes_the_matrix():
    output = interact("4\n9\n2 2\n1 2\n3 4\n0\n")
    assert "ERROR: Unknown choice: '9'\n" in output
    assert "The multiplication result is:" not in output
    assert output.count(MENU) == 2
    assert output.endswith(MENU)


def test_interactive_bad_number_drops_rest_of_line():
    output = interact("5\n2 2\n1 x 3 4\n0\n")
    assert "ERROR: Expected a number, got 'x'\n" in output
    assert "Matrix dimensions must be positive" not in output
    assert output.count(MENU) == 2
    assert output.endswith(MENU)
