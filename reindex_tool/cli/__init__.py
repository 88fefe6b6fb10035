"""
cli - Command Line Interface for Reindex Tool
"""

from .cli_entry import main, create_parser

__all__ = ["main", "create_parser"]
