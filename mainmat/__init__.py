"""Interactive interpreter for 4x4 matrix commands on six named registers."""

__version__ = "1.0.0"
