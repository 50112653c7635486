"""Run the dashboard backend with ``python -m dashboard``."""

from .main import run

run()
