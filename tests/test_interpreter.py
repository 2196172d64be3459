import io

import pytest

from montyvm.errors import (
    EmptyStackError,
    FileOpenError,
    MontyError,
    PushUsageError,
    UnknownInstructionError,
)
from montyvm.interpreter import Interpreter, is_comment, main, run_file


def _run(lines):
    out = io.StringIO()
    interpreter = Interpreter(out)
    interpreter.run(lines)
    return out.getvalue(), interpreter


@pytest.mark.parametrize(
    "line, expected",
    [
        ("# comment", True),
        ("   # indented", True),
        ("#", True),
        ("\t# tab first", False),
        ("push 1", False),
        ("", False),
        ("   ", False),
    ],
)
def test_is_comment(line, expected):
    assert is_comment(line) is expected


def test_push_and_pall_prints_top_first():
    output, _ = _run(["push 1\n", "push 2\n", "push 3\n", "pall\n"])
    assert output == "3\n2\n1\n"


def test_queue_mode_pall_order():
    output, _ = _run(["queue", "push 1", "push 2", "push 3", "pall"])
    assert output == "1\n2\n3\n"


def test_tabs_and_extra_tokens_are_handled():
    output, interpreter = _run(["\tpush\t5 extra\n", "pint\n"])
    assert output == "5\n"
    assert list(interpreter.stack) == [5]


def test_blank_and_comment_lines_do_nothing():
    output, interpreter = _run(["\n", "   \n", "# push 9\n", "push 4\n", "pall\n"])
    assert output == "4\n"
    assert len(interpreter.stack) == 1


def test_comment_lines_still_count_for_line_numbers():
    with pytest.raises(UnknownInstructionError) as info:
        _run(["# note\n", "\n", "bogus 1\n"])
    assert info.value.line_number == 3
    assert str(info.value) == "L3: unknown instruction bogus"


def test_tab_before_hash_is_an_instruction():
    with pytest.raises(UnknownInstructionError) as info:
        _run(["\t# not a comment\n"])
    assert info.value.opcode == "#"


def test_push_without_argument():
    with pytest.raises(PushUsageError) as info:
        _run(["push\n"])
    assert str(info.value) == "L1: usage: push integer"


def test_push_with_bad_argument():
    with pytest.raises(PushUsageError):
        _run(["push 1\n", "push abc\n"])


def test_output_before_error_is_kept():
    out = io.StringIO()
    interpreter = Interpreter(out)
    with pytest.raises(EmptyStackError) as info:
        interpreter.run(["push 7", "pint", "pop", "pint"])
    assert out.getvalue() == "7\n"
    assert str(info.value) == "L4: can't pint, stack empty"


def test_pstr_and_pchar_output():
    output, _ = _run(["push 0", "push 105", "push 72", "pstr", "pchar"])
    assert output == "Hi\nH\n"


def test_execute_line_single_instruction():
    out = io.StringIO()
    interpreter = Interpreter(out)
    interpreter.execute_line("push 12\n", 1)
    interpreter.execute_line("pall\n", 2)
    assert out.getvalue() == "12\n"


def test_run_file(tmp_path):
    path = tmp_path / "prog.m"
    path.write_text("push 1\npush 2\nswap\npall\n")
    out = io.StringIO()
    interpreter = run_file(str(path), out)
    assert out.getvalue() == "1\n2\n"
    assert list(interpreter.stack) == [1, 2]


def test_run_file_without_trailing_newline(tmp_path):
    path = tmp_path / "prog.m"
    path.write_text("push 8\npall")
    out = io.StringIO()
    run_file(str(path), out)
    assert out.getvalue() == "8\n"


def test_run_file_missing(tmp_path):
    missing = str(tmp_path / "nope.m")
    with pytest.raises(FileOpenError) as info:
        run_file(missing, io.StringIO())
    assert str(info.value) == f"Error: Can't open file {missing}"


def test_run_file_empty_fails(tmp_path):
    path = tmp_path / "empty.m"
    path.write_text("")
    with pytest.raises(MontyError):
        run_file(str(path), io.StringIO())


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "USAGE: monty file\n"
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().err == "USAGE: monty file\n"


def test_main_success(tmp_path, capsys):
    path = tmp_path / "prog.m"
    path.write_text("push 3\npush 4\nadd\npall\n")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "7\n"
    assert captured.err == ""


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "prog.m"
    path.write_text("push 2\npall\npop\npop\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "2\n"
    assert captured.err == "L4: can't pop an empty stack\n"


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "gone.m")
    assert main([missing]) == 1
    assert capsys.readouterr().err == f"Error: Can't open file {missing}\n"


def test_main_empty_file_is_silent_failure(tmp_path, capsys):
    path = tmp_path / "empty.m"
    path.write_text("")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""