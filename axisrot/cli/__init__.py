# axisrot/cli/__init__.py
"""Command-line runners."""
