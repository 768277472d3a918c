"""Command line entry point: load a process file and run the scheduler."""

from __future__ import annotations

import sys
from typing import Sequence

from rrsched.loader import load_processes
from rrsched.process_queue import ProcessQueue
from rrsched.scheduler import simulate_scheduler

LOG_FILE = "logger.log"
INSTRUCTIONS_DIR = "instructions"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation for the process file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: rrsched <file>")
        return 1
    path = args[0]

    try:
        log = open(LOG_FILE, "a+", encoding="utf-8")
    except OSError:
        print(f"Error opening {LOG_FILE}")
        return 1

    with log:
        try:
            processes = open(path, encoding="utf-8")
        except OSError:
            log.write(f"Error opening file: {path}\n")
            return 1

        with processes:
            log.write(f"File {path} opened successfully!\n")
            queue = ProcessQueue()
            load_processes(processes, queue, INSTRUCTIONS_DIR)
            simulate_scheduler(queue)
    return 0


if __name__ == "__main__":
    sys.exit(main())