"""
core - Reindex Tool Core Module

Provides core functionalities such as filename parsing, directory scanning,
rename plan generation, execution, etc.
"""

from .models_fs import (
    SortKey,
    ParsedEntry,
    ReindexOptions,
    RenameOp,
    RenamePlan,
    Outcome,
    EntryOutcome,
)

from .parse_name import (
    extract_key,
    format_index_name,
)

from .scan_files import (
    scan_directory,
    ScanResult,
)

from .sort_rules import (
    sort_entries,
    compute_width,
)

from .plan_rename import (
    plan_reindex,
)

from .exec_rename import (
    execute_plan,
    RenameResult,
)

from .safety_checks import (
    check_name_representable,
    check_rename_op,
)

__all__ = [
    # Data models
    "SortKey",
    "ParsedEntry",
    "ReindexOptions",
    "RenameOp",
    "RenamePlan",
    "Outcome",
    "EntryOutcome",
    "RenameResult",
    "ScanResult",

    # Parsing
    "extract_key",
    "format_index_name",

    # Scanning
    "scan_directory",

    # Sorting
    "sort_entries",
    "compute_width",

    # Planning
    "plan_reindex",

    # Execution
    "execute_plan",

    # Safety checks
    "check_name_representable",
    "check_rename_op",
]
