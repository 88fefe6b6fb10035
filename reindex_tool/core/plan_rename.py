"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Order parsed entries by key
- Compute the index width
- Output RenamePlan with one operation per entry, in ranked order
"""

from pathlib import Path
from typing import List, Optional
import logging

from .models_fs import ParsedEntry, RenamePlan, ReindexOptions
from .parse_name import format_index_name
from .sort_rules import sort_entries, compute_width

logger = logging.getLogger(__name__)


def plan_reindex(
    entries: List[ParsedEntry],
    options: Optional[ReindexOptions] = None,
    directory: Optional[Path] = None
) -> RenamePlan:
    """
    Generate reindex rename plan

    Destinations are unique: each carries its own rank.

    Args:
        entries: Parsed entries, in directory listing order
        options: Reindex options
        directory: Directory the entries live in

    Returns:
        Rename plan
    """
    if options is None:
        options = ReindexOptions()

    plan = RenamePlan(directory=Path(directory or "."), options=options)

    sorted_entries = sort_entries(entries)
    plan.width = compute_width(len(sorted_entries), options.min_width)

    for index, entry in enumerate(sorted_entries):
        new_name = format_index_name(index, plan.width, entry.residual)
        plan.add_op(index, entry.name, new_name)
        logger.debug("%s %s -> %s", entry.key, entry.name, new_name)

    return plan
