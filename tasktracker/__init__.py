"""Track tasks from the command line, kept in a plain text file."""

__version__ = "0.1.0"