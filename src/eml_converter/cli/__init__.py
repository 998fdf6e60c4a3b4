"""
CLI module for email conversion.

Provides command-line tools for single-file and batch conversion.
"""

from eml_converter.cli.convert import main as convert_main

__all__ = ["convert_main"]
