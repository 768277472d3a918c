"""Simulated process: registers, program counter and program."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rrsched.instruction import Instruction, InstructionType, execute_instruction


class ProcessState(Enum):
    """Scheduling state of a process."""

    READY = "Ready"
    RUNNING = "Running"
    TERMINATED = "Terminated"


@dataclass
class Process:
    """A process with its own copy of a program."""

    pid: int
    ax: int
    bx: int
    cx: int
    quantum: int
    instructions: list[Instruction] = field(default_factory=list)
    pc: int = 0
    state: ProcessState = ProcessState.READY

    def __post_init__(self) -> None:
        self.instructions = list(self.instructions)

    def execute_next(self) -> None:
        """Run the instruction at the program counter and advance it unless it jumped."""
        if not 0 <= self.pc < len(self.instructions):
            print(f"[ERROR] PC out of range: {self.pc}")
            return
        instr = self.instructions[self.pc]
        execute_instruction(instr, self)
        if instr.type is not InstructionType.JMP:
            self.pc += 1

    def has_finished(self) -> bool:
        """True once the program counter has run past the last instruction."""
        return self.pc >= len(self.instructions)

    def format_state(self) -> str:
        """One-line summary of the process; PC shows the last executed index."""
        return (
            f"  PID={self.pid} | PC={self.pc - 1} | AX={self.ax} | BX={self.bx}"
            f" | CX={self.cx} | State={self.state.value}"
        )

    def print_state(self) -> str:
        """Print the summary line and return it."""
        line = self.format_state()
        print(line)
        return line