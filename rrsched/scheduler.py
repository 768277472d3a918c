"""Round-robin scheduling of simulated processes."""

from __future__ import annotations

import sys

from rrsched.process import Process, ProcessState
from rrsched.process_queue import ProcessQueue


def _run_slice(proc: Process, clock: int) -> int:
    """Run ``proc`` for up to one quantum starting at ``clock``; return the new clock."""
    remaining = proc.quantum
    while remaining > 0 and not proc.has_finished():
        print(f"Cycle {clock} | PID {proc.pid} | Executing: ", end="")
        proc.execute_next()
        proc.print_state()
        remaining -= 1
        clock += 1
        # Each cycle moves the program counter on once more after the step itself.
        proc.pc += 1
    return clock


def simulate_scheduler(queue: ProcessQueue) -> int:
    """Run every queued process to completion in round-robin order.

    Processes that still have instructions after their quantum go to the
    back of the queue. Returns the clock cycle at which the simulation ended.
    """
    clock = 0
    while not queue.is_empty():
        proc = queue.dequeue()
        if proc is None:
            print("Error: Process Null when dequeue.", file=sys.stderr)
            continue

        print(f"\n[Context Switch] PID: {proc.pid} (Quantum: {proc.quantum})")
        proc.state = ProcessState.RUNNING
        clock = _run_slice(proc, clock)
        proc.state = ProcessState.READY

        if not proc.has_finished():
            queue.enqueue(proc)
        else:
            print(f"------> PID {proc.pid} has finished execution. <------")
            proc.state = ProcessState.TERMINATED
            proc.print_state()

    print(f"\nSimulation finished at clock cycle: {clock}")
    return clock