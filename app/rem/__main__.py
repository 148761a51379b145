"""Allow running rem as ``python -m rem``."""

from rem.cli.main import app

app(prog_name="rem")
