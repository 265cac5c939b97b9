"""Allow ``python -m utilhub``."""

from utilhub.cli import app

app()
