"""Allow running treesweep as ``python -m treesweep``."""

from treesweep.cli.main import app

app(prog_name="treesweep")
