"""
reindex_tool - Renumber <index>-<name> files in a directory
"""

__version__ = "1.0.0"
