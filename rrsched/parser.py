"""Parsing of process descriptions and instruction files."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from rrsched.instruction import MAX_INSTRUCTIONS, Instruction, InstructionType, Register

_PROCESS_LINE = re.compile(
    r"PID:\s*([+-]?\d+),\s*AX=\s*([+-]?\d+),\s*BX=\s*([+-]?\d+),"
    r"\s*CX=\s*([+-]?\d+),\s*Quantum=\s*([+-]?\d+)"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_FIRST_WORD = re.compile(r"\s*(\S+)")
_ARG_LIMIT = 31

_REGISTERS = {reg.name: reg for reg in Register}


@dataclass(frozen=True)
class ProcessSpec:
    """Initial values of a process as written in a process file."""

    pid: int
    ax: int
    bx: int
    cx: int
    quantum: int


def parse_process_line(line: str) -> ProcessSpec:
    """Parse ``PID: n, AX=n, BX=n, CX=n, Quantum=n``; raise ValueError otherwise."""
    match = _PROCESS_LINE.match(line)
    if match is None:
        raise ValueError(f"invalid process line: {line!r}")
    return ProcessSpec(*(int(group) for group in match.groups()))


def get_instruction_type(name: str) -> InstructionType:
    """Map a mnemonic to its type; anything unknown is a NOP."""
    try:
        return InstructionType(name)
    except ValueError:
        return InstructionType.NOP


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _strip_comma(text: str) -> str:
    return text[:-1] if text.endswith(",") else text


def _parse_arithmetic(kind: InstructionType, op: str, rest: str, line: str) -> Instruction:
    dest, comma, tail = rest.lstrip().partition(",")
    destination = _REGISTERS.get(dest)
    if not dest or destination is None:
        raise ValueError(f"Destination must be a register for {op}: {line}")
    source: Register | int = 0
    if comma and len(dest) <= _ARG_LIMIT:
        parts = tail.split(maxsplit=1)
        if parts:
            arg = _strip_comma(parts[0][:_ARG_LIMIT])
            register = _REGISTERS.get(arg)
            source = register if register is not None else _atoi(arg)
    return Instruction(kind, destination, source)


def parse_instruction_line(line: str) -> Instruction | None:
    """Decode one line of an instruction file.

    Returns None for blank and comment lines; raises ValueError for a
    malformed ADD, SUB, MUL, INC or JMP.
    """
    text = line.lstrip(" \t")
    if not text or text[0] in "\n#":
        return None
    match = _FIRST_WORD.match(text)
    if match is None:
        return None
    op = match.group(1)
    rest = text[match.end():]
    kind = get_instruction_type(op)

    if kind in (InstructionType.ADD, InstructionType.SUB, InstructionType.MUL):
        return _parse_arithmetic(kind, op, rest, line)

    args = rest.split()
    arg = args[0][:_ARG_LIMIT] if args else None

    if kind is InstructionType.INC:
        if arg is None:
            raise ValueError(f"INC requires a register: {line}")
        register = _REGISTERS.get(arg)
        if register is None:
            raise ValueError(f"INC needs a register operand: {line}")
        return Instruction(kind, register)

    if kind is InstructionType.JMP:
        if arg is None:
            raise ValueError(f"JMP requires a target instruction number: {line}")
        return Instruction(kind, _atoi(arg))

    return Instruction(InstructionType.NOP)


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Decode a program, skipping blank, comment and malformed lines.

    At most MAX_INSTRUCTIONS instructions are kept.
    """
    program: list[Instruction] = []
    for line in lines:
        if len(program) >= MAX_INSTRUCTIONS:
            break
        try:
            instr = parse_instruction_line(line)
        except ValueError as error:
            print(error, file=sys.stderr)
            continue
        if instr is not None:
            program.append(instr)
    return program


def load_instructions(pid: int, directory: str | Path = "instructions") -> list[Instruction]:
    """Read ``<directory>/<pid>.txt``; raises OSError if it cannot be opened."""
    path = Path(directory) / f"{pid}.txt"
    with path.open(encoding="utf-8") as handle:
        return parse_instructions(handle)