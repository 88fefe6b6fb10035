"""
gui - PySide6 Interface for Reindex Tool
"""

from .gui_entry import main

__all__ = ["main"]
