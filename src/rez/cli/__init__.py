"""Command-line interface module for rez.

This module provides the ``rez`` tool for escaping files and standard input and
for concatenating values from the command line.
"""

from .main import main

__all__ = ["main"]
