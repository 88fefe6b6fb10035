"""
parse_name.py - Indexed Filename Parsing

Splits names of the form <digits>-<digits>-...-<name> into a numeric
sort key and the residual name
"""

from typing import Optional, List

from .models_fs import ParsedEntry, SortKey

SEPARATOR = "-"


def is_ascii_digit(char: str) -> bool:
    """Check for 0-9 only (str.isdigit also accepts other scripts)"""
    return "0" <= char <= "9"


def extract_key(file_name: str) -> Optional[ParsedEntry]:
    """
    Parse the index prefix of a filename

    Every separator closes the current digit run (an empty run counts as 0).
    Scanning stops at the first other character; a digit run that is not
    closed by a separator is discarded.

    Args:
        file_name: Filename (no directory part)

    Returns:
        Parsed entry, or None if the name does not start with an index group
    """
    indices: List[int] = []
    residual_start = 0
    acc = 0

    for char_index, char in enumerate(file_name):
        if char == SEPARATOR:
            indices.append(acc)
            acc = 0
            residual_start = char_index + 1
        elif is_ascii_digit(char):
            acc = acc * 10 + (ord(char) - ord("0"))
        elif not indices:
            return None
        else:
            break

    if not indices:
        # Only digits (or empty): nothing was closed by a separator
        return None

    return ParsedEntry(
        name=file_name,
        key=SortKey(tuple(indices)),
        residual=file_name[residual_start:],
    )


def format_index_name(index: int, width: int, residual: str) -> str:
    """
    Build the target filename for a rank

    Args:
        index: New index
        width: Zero padding digits
        residual: Name part kept from the original filename

    Returns:
        Filename like 007-residual
    """
    return f"{str(index).zfill(width)}{SEPARATOR}{residual}"
