# axisrot/core/__init__.py
"""Core numeric routines."""
