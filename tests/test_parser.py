import pytest

from rrsched.instruction import MAX_INSTRUCTIONS, Instruction, InstructionType, Register
from rrsched.parser import (
    ProcessSpec,
    get_instruction_type,
    load_instructions,
    parse_instruction_line,
    parse_instructions,
)
from rrsched.parser import parse_process_line

ADD, SUB, MUL, INC, JMP, NOP = (
    InstructionType.ADD,
    InstructionType.SUB,
    InstructionType.MUL,
    InstructionType.INC,
    InstructionType.JMP,
    InstructionType.NOP,
)


def test_parse_process_line():
    spec = parse_process_line("PID: 1, AX=2, BX=3, CX=4, Quantum=5\n")
    assert spec == ProcessSpec(1, 2, 3, 4, 5)


def test_parse_process_line_negative_and_spacing():
    spec = parse_process_line("PID:12,   AX= -7, BX=0, CX=+9, Quantum=3 trailing")
    assert spec == ProcessSpec(12, -7, 0, 9, 3)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "garbage\n",
        " PID: 1, AX=2, BX=3, CX=4, Quantum=5",
        "PID: 1, AX=2, BX=3, CX=4\n",
        "PID: x, AX=2, BX=3, CX=4, Quantum=5",
    ],
)
def test_parse_process_line_invalid(line):
    with pytest.raises(ValueError):
        parse_process_line(line)


@pytest.mark.parametrize("kind", list(InstructionType))
def test_get_instruction_type_known(kind):
    assert get_instruction_type(kind.value) is kind


@pytest.mark.parametrize("name", ["HALT", "add", ""])
def test_get_instruction_type_unknown_is_nop(name):
    assert get_instruction_type(name) is NOP


def test_add_with_immediate():
    assert parse_instruction_line("ADD AX, 5\n") == Instruction(ADD, Register.AX, 5)


def test_sub_with_register_no_space():
    assert parse_instruction_line("SUB BX,CX\n") == Instruction(SUB, Register.BX, Register.CX)


def test_mul_trailing_comma_stripped():
    assert parse_instruction_line("MUL CX, AX,\n") == Instruction(MUL, Register.CX, Register.AX)


def test_atoi_reads_leading_digits():
    assert parse_instruction_line("ADD AX, -4x\n") == Instruction(ADD, Register.AX, -4)


def test_missing_source_defaults_to_zero():
    assert parse_instruction_line("ADD AX") == Instruction(ADD, Register.AX, 0)
    assert parse_instruction_line("ADD AX,\n") == Instruction(ADD, Register.AX, 0)


@pytest.mark.parametrize(
    "line",
    ["ADD AX 5\n", "ADD 5, AX\n", "ADD\n", "SUB , AX\n", "MUL DX, 1\n", "ADD AX , 1\n"],
)
def test_arithmetic_bad_destination(line):
    with pytest.raises(ValueError):
        parse_instruction_line(line)


def test_inc():
    assert parse_instruction_line("  INC CX\n") == Instruction(INC, Register.CX)


@pytest.mark.parametrize("line", ["INC\n", "INC 5\n", "INC AX,\n"])
def test_inc_invalid(line):
    with pytest.raises(ValueError):
        parse_instruction_line(line)


def test_jmp():
    assert parse_instruction_line("JMP 3\n") == Instruction(JMP, 3)


def test_jmp_non_numeric_target_is_zero():
    assert parse_instruction_line("JMP abc\n") == Instruction(JMP, 0)


def test_jmp_without_target():
    with pytest.raises(ValueError):
        parse_instruction_line("JMP\n")


@pytest.mark.parametrize("line", ["", "\n", "# comment\n", "\t  # indented\n", "   \t\n"])
def test_blank_and_comment_lines(line):
    assert parse_instruction_line(line) is None


def test_unknown_is_nop():
    assert parse_instruction_line("HALT now\n") == Instruction(NOP)


def test_parse_instructions_skips_invalid(capsys):
    lines = ["# prog\n", "ADD AX, 1\n", "INC 9\n", "\n", "JMP 0\n", "NOP\n"]
    program = parse_instructions(lines)
    assert program == [
        Instruction(ADD, Register.AX, 1),
        Instruction(JMP, 0),
        Instruction(NOP),
    ]
    assert "INC" in capsys.readouterr().err


def test_parse_instructions_limit():
    program = parse_instructions(["NOP\n"] * (MAX_INSTRUCTIONS + 6))
    assert len(program) == MAX_INSTRUCTIONS


def test_load_instructions(tmp_path):
    (tmp_path / "7.txt").write_text("INC AX\nMUL AX, BX\n", encoding="utf-8")
    program = load_instructions(7, tmp_path)
    assert program == [
        Instruction(INC, Register.AX),
        Instruction(MUL, Register.AX, Register.BX),
    ]


def test_load_instructions_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_instructions(99, tmp_path)