"""
scan_files.py - Directory Scanning Module

Lists a single directory (non-recursive) and keeps the entries whose
names follow the <index>-<name> convention
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Callable
import logging
import os

from .models_fs import ParsedEntry
from .parse_name import extract_key
from .safety_checks import check_name_representable

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Directory scan result"""
    directory: Path
    entries: List[ParsedEntry] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)     # Skipped entries
    unmatched: int = 0                                  # Names without index prefix


def scan_directory(
    directory: Path,
    progress_callback: Optional[Callable[[str], None]] = None
) -> ScanResult:
    """
    Scan single directory (non-recursive)

    Entries keep the order the OS lists them in; that order decides ties
    between equal keys later on.

    Args:
        directory: Target directory
        progress_callback: Progress callback function

    Returns:
        Scan result

    Raises:
        OSError: The directory cannot be opened
    """
    directory = Path(directory)
    result = ScanResult(directory=directory)

    with os.scandir(directory) as it:
        while True:
            try:
                item = next(it)
            except StopIteration:
                break
            except OSError as e:
                # The iterator is closed after a read error, so the loop ends
                msg = f"An error occurred while iterating over directory contents: {e}"
                logger.warning(msg)
                result.errors.append(msg)
                continue

            name = item.name

            if progress_callback:
                progress_callback(name)

            valid, error = check_name_representable(name)
            if not valid:
                logger.warning("Skip entry: %s", error)
                result.errors.append(f"Skip entry: {error}")
                continue

            parsed = extract_key(name)
            if parsed is None:
                logger.debug("No index prefix: %s", name)
                result.unmatched += 1
                continue

            result.entries.append(parsed)

    logger.debug(
        "Scanned %s: %d indexed, %d unmatched, %d errors",
        directory, len(result.entries), result.unmatched, len(result.errors)
    )
    return result
