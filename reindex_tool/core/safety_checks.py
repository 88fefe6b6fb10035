"""
safety_checks.py - Safety Check Module

Provides checks before names are parsed and before files are renamed
"""

from pathlib import Path
from typing import Tuple, Optional
import os


def check_name_representable(name: str) -> Tuple[bool, Optional[str]]:
    """
    Check if a filename can be represented as text

    Bytes that are not valid in the filesystem encoding arrive from
    os.scandir as lone surrogates; such names cannot be re-encoded.

    Args:
        name: Filename as returned by the OS

    Returns:
        (is_representable, error_reason)
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False, f"Filename is not valid text: {name!r}"
    return True, None


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    # os.path.lexists also sees dangling symlinks
    if not os.path.lexists(src):
        return False, f"Source does not exist: {src.name}"

    if os.path.lexists(dst):
        return False, f"Destination already exists: {dst.name}"

    return True, None
