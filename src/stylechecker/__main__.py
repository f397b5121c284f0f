"""Allow ``python -m stylechecker``."""

from stylechecker.cli import run

run()
