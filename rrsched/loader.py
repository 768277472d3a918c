"""Loading of process descriptions into a run queue."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from rrsched.parser import load_instructions, parse_process_line
from rrsched.process import Process
from rrsched.process_queue import ProcessQueue


def load_processes(
    lines: Iterable[str],
    queue: ProcessQueue,
    instructions_dir: str | Path = "instructions",
) -> list[Process]:
    """Create a process for each valid line and enqueue it.

    Each process's program is read from ``<instructions_dir>/<pid>.txt``.
    Invalid lines and processes whose program cannot be read are reported
    and skipped. Returns the processes that were enqueued, in order.
    """
    loaded: list[Process] = []
    for line in lines:
        try:
            spec = parse_process_line(line)
        except ValueError:
            print(f"Invalid line: {line}", end="" if line.endswith("\n") else "\n")
            continue

        try:
            program = load_instructions(spec.pid, instructions_dir)
        except OSError as error:
            print(f"Error opening instruction file: {error}", file=sys.stderr)
            print(f"Can not load the file instructions for PID {spec.pid}")
            continue

        proc = Process(spec.pid, spec.ax, spec.bx, spec.cx, spec.quantum, program)
        queue.enqueue(proc)
        loaded.append(proc)
        print(f"Process {spec.pid} loaded. ")
        proc.print_state()
    return loaded