"""rem - a command-line trash can.

Moves files into a recoverable holding directory and keeps a ledger of
where everything went so it can be put back.
"""

__version__ = "0.1.0"
