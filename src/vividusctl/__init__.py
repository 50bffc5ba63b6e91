"""vividusctl — command-line runner for VIVIDUS test projects."""

__version__ = "0.1.0"
