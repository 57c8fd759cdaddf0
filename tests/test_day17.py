import pytest

from advent24.day17 import (
    Computer,
    InvalidOperandError,
    load_computer,
    main,
    parse_computer,
    search_candidates,
)


def _run(text):
    computer = parse_computer(text)
    computer.run()
    return computer


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,2", 182),
        ("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,3", 91),
        ("Register A: 729\nRegister B: 7\nRegister C: 0\n\nProgram: 0,5", 5),
        ("Register A: 729\nRegister B: 1\nRegister C: 2\n\nProgram: 0,5,0,6", 91),
    ],
)
def test_adv(text, expected):
    assert _run(text).a == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Register A: 729\nRegister B: 5\nRegister C: 0\n\nProgram: 1,3", 6),
        ("Register A: 729\nRegister B: 63\nRegister C: 0\n\nProgram: 1,7324,1,32,1,124", 7423),
    ],
)
def test_bxl(text, expected):
    assert _run(text).b == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 2,2", 2),
        ("Register A: 729\nRegister B: 44\nRegister C: 0\n\nProgram: 2,5", 4),
        ("Register A: 6\nRegister B: 0\nRegister C: 327\n\nProgram: 2,4,2,6", 7),
    ],
)
def test_bst(text, expected):
    assert _run(text).b == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 3,5", 5),
        ("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 3,4,3,7,3,2", 7),
    ],
)
def test_jnz(text, expected):
    assert _run(text).pointer == expected


def test_jnz_does_not_jump_when_a_is_zero():
    computer = _run("Register A: 0\nRegister B: 0\nRegister C: 0\n\nProgram: 3,0")
    assert computer.pointer == 2


def test_worked_example_output():
    text = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0"
    assert _run(text).output_string() == "4,6,3,5,6,3,5,2,1,0"


def test_bxc_and_cdv():
    computer = Computer(a=729, b=5, c=0, program=[7, 2, 4, 0])
    computer.run()
    assert computer.c == 182
    assert computer.b == 5 ^ 182


def test_odd_length_program_stops_before_dangling_opcode():
    computer = _run("Register A: 729\nProgram: 0,2,5")
    assert computer.a == 182
    assert computer.pointer == 2
    assert computer.output == []


def test_step_reports_halt():
    computer = Computer(program=[1, 1])
    assert computer.step() is True
    assert computer.step() is False


def test_invalid_combo_operand_raises():
    computer = Computer(a=1, program=[5, 7])
    with pytest.raises(InvalidOperandError):
        computer.run()


def test_negative_register_divides_towards_zero():
    computer = Computer(a=-7, program=[0, 1])
    computer.run()
    assert computer.a == -3


@pytest.mark.parametrize(
    "text",
    [
        "Register A: x\nProgram: 0,1",
        "Register B: 1.5",
        "Register C:",
        "Program: 0, 1",
    ],
)
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse_computer(text)


def test_parse_ignores_unknown_lines():
    computer = parse_computer("Comment\nRegister A: 10\nProgram: 5,4")
    assert computer.a == 10
    assert computer.program == [5, 4]


def test_load_computer(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n")
    assert load_computer(path).run() == [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_search_candidates_all_match_first_output():
    program = [5, 4]
    found = list(search_candidates(program, 3, 20))
    assert [candidate for candidate, _ in found] == [3, 11, 19]
    for candidate, result in found:
        computer = Computer(a=candidate, program=list(program))
        computer.run()
        assert computer.output_string() == result
        assert result.split(",")[0] == "3"


def test_search_candidates_skips_programs_without_output():
    assert list(search_candidates([1, 1], 0, 5)) == []


def test_main_runs_input(capsys):
    text = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0"
    assert main(["--input", text]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "4,6,3,5,6,3,5,2,1,0"


def test_main_search_prints_candidates(capsys):
    assert main(["--search", "--program", "5,4", "--first-output", "3", "--limit", "12"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "candidate: 3, binary: 0000000011, result: 3",
        "candidate: 11, binary: 0000001011, result: 3",
    ]


def test_main_reports_invalid_operand(capsys):
    assert main(["--input", "Register A: 1\nProgram: 5,7"]) == 1
    assert "invalid combo operand" in capsys.readouterr().err