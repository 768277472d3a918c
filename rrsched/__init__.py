"""Round-robin CPU scheduler simulator over small register-machine processes."""

__version__ = "0.1.0"