"""
Main entry point for the argcat CLI.

This module serves as the entry point when running the package as a module:
    python -m arg_input

or after installation:
    argcat
"""

from .cli import app

if __name__ == "__main__":
    app()
