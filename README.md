# rrsched

A small round-robin CPU scheduler simulator. Each process is a tiny register
machine with three registers (`AX`, `BX`, `CX`), a program counter and a
quantum. The scheduler gives each process up to its quantum of cycles, then
moves it to the back of the ready queue. This repeats until every process
has finished. Each cycle is printed as it runs.

## Installation

```
pip install .
```

## Usage

```
rrsched processes.txt
```

Without an argument the command prints `Usage: rrsched <file>` and exits
with status 1. Each run appends one line to `logger.log` in the current
directory. The line says either that the process file was opened or that it
could not be opened.

### Process file

Each line describes one process:

```
PID: 1, AX=0, BX=2, CX=3, Quantum=2
PID: 2, AX=5, BX=0, CX=1, Quantum=3
```

Lines that do not match this form are printed as `Invalid line: ...` and
skipped.

### Instruction files

The program for process `N` is read from `instructions/N.txt`, relative
to the current directory. A process whose instruction file cannot be opened
is reported and skipped. The file holds one instruction per line. Blank
lines and lines that start with `#` are ignored:

```
# add BX into AX
ADD AX, BX
SUB CX, 1
MUL AX,2
INC BX
JMP 0
NOP
```

- `ADD`, `SUB` and `MUL` take a destination register, a comma, and a
  source. The source is either a register or an integer. The destination
  must come directly before the comma. If nothing follows the comma, the
  source is 0.
- `INC` takes a register.
- `JMP` takes the index of the target instruction.
- Any other mnemonic is treated as `NOP`.

Malformed `ADD`, `SUB`, `MUL`, `INC` and `JMP` lines are reported on
standard error and skipped. At most 1024 instructions are kept per file.

### How a cycle advances

A cycle runs the instruction at the program counter. Afterwards the
counter moves past it, except after a `JMP`, which sets the counter
itself. The scheduler then advances the counter by one more place. So a
cycle skips the instruction that follows the one it ran, and a `JMP` lands
one past its target. The `PC` shown in each state line is the counter
minus one.

## Library use

```python
from rrsched.process_queue import ProcessQueue
from rrsched.loader import load_processes
from rrsched.scheduler import simulate_scheduler

queue = ProcessQueue()
with open("processes.txt") as lines:
    processes = load_processes(lines, queue, "instructions")
final_cycle = simulate_scheduler(queue)
```

- `load_processes` returns the processes it enqueued.
- `simulate_scheduler` returns the clock cycle at which the simulation ended.

The modules:

- `rrsched.parser` reads the two file formats on their own:
  - `parse_process_line` returns a `ProcessSpec` and raises `ValueError` on a bad line.
  - `get_instruction_type` maps a mnemonic to its type.
  - `parse_instruction_line` decodes one instruction line.
  - `parse_instructions` decodes a whole program.
  - `load_instructions(pid, directory)` reads one instruction file.
- `rrsched.instruction` defines `InstructionType`, `Register` and
  `Instruction`. Its `execute_instruction` runs one instruction against a
  process.
- `rrsched.process.Process` provides:
  - `execute_next`
  - `has_finished`
  - `format_state`
  - `print_state`

  Its `state` is a `ProcessState`: `READY`, `RUNNING` or `TERMINATED`.
- `rrsched.process_queue.ProcessQueue` is a FIFO queue. Its `dequeue`
  raises `QueueUnderflowError` when the queue is empty.

## Running the tests

```
pip install ".[test]"
pytest
```