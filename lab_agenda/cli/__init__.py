"""Command line interface (``python -m lab_agenda.cli``)."""

from .run import main

__all__ = ["main"]
