"""Instruction set of the simulated CPU and its executor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

MAX_INSTRUCTIONS = 1024


class InstructionType(Enum):
    """Operations understood by the simulated CPU."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    INC = "INC"
    JMP = "JMP"
    NOP = "NOP"


class Register(Enum):
    """General purpose registers; the value is the process attribute name."""

    AX = "ax"
    BX = "bx"
    CX = "cx"


Operand = Union[Register, int]


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction. Operands are either a register or an immediate."""

    type: InstructionType
    op1: Operand = 0
    op2: Operand = 0


def _value(operand: Operand, proc: Any) -> int:
    if isinstance(operand, Register):
        return getattr(proc, operand.value)
    return operand


_BINARY_OPS = {
    InstructionType.ADD: ("+", lambda a, b: a + b),
    InstructionType.SUB: ("-", lambda a, b: a - b),
    InstructionType.MUL: ("*", lambda a, b: a * b),
}


def execute_instruction(instr: Instruction, proc: Any) -> None:
    """Apply ``instr`` to the registers or program counter of ``proc``.

    Arithmetic and INC only act when the first operand is a register.
    JMP sets the program counter directly.
    """
    dest = instr.op1 if isinstance(instr.op1, Register) else None

    if instr.type in _BINARY_OPS:
        if dest is None:
            return
        symbol, operation = _BINARY_OPS[instr.type]
        left = _value(instr.op1, proc)
        right = _value(instr.op2, proc)
        result = operation(left, right)
        setattr(proc, dest.value, result)
        print(f"    [{instr.type.value}] {dest.name} = {left} {symbol} {right} -> {result}")
    elif instr.type is InstructionType.INC:
        if dest is None:
            return
        result = getattr(proc, dest.value) + 1
        setattr(proc, dest.value, result)
        print(f"    [INC] {dest.name}++ -> {result}")
    elif instr.type is InstructionType.JMP:
        proc.pc = instr.op1 if isinstance(instr.op1, int) else 0
        print(f"    [JMP] Jumping to instruction {proc.pc}")
    else:
        print("    [NOP] No operation.")