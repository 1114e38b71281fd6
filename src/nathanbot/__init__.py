"""NathanBot: a command-line task tracker with write-through file persistence."""

__version__ = "0.1.0"
