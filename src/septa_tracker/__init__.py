"""Live SEPTA Regional Rail tracking and next-to-arrive correlation."""

__version__ = "0.1.0"
