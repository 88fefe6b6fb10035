"""
models_fs.py - Core Data Structure Definitions

Contains:
- SortKey: Numeric key parsed from an indexed filename
- ParsedEntry: Directory entry that follows the <index>-<name> convention
- ReindexOptions: Run configuration
- RenameOp: Single rename operation
- RenamePlan: Batch rename plan
- Outcome / EntryOutcome: Per-entry execution result
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Tuple
from enum import Enum


@dataclass(frozen=True, order=True)
class SortKey:
    """
    Ordered sequence of non-negative integers

    Comparison is lexicographic over the components; a key that is a
    prefix of another sorts first.
    """
    indices: Tuple[int, ...] = ()

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.indices) + "]"


@dataclass(frozen=True)
class ParsedEntry:
    """Directory entry with its parsed key"""
    name: str                       # Original filename (handle for renaming)
    key: SortKey                    # Parsed index groups
    residual: str                   # Filename after the last index group


@dataclass(frozen=True)
class ReindexOptions:
    """Reindex options configuration"""
    dry_run: bool = False           # Preview only, do not actually execute
    min_width: int = 2              # Minimum zero padding digits

    def __post_init__(self):
        if self.min_width < 0:
            raise ValueError(f"Minimum width cannot be negative: {self.min_width}")


@dataclass(frozen=True)
class RenameOp:
    """Single rename operation"""
    index: int                      # New index (0-based rank)
    src_name: str                   # Source filename
    dst_name: str                   # Destination filename

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src_name == self.dst_name


@dataclass
class RenamePlan:
    """Batch rename plan"""
    directory: Path = field(default_factory=lambda: Path("."))
    ops: List[RenameOp] = field(default_factory=list)
    width: int = 0
    options: ReindexOptions = field(default_factory=ReindexOptions)

    @property
    def valid_ops(self) -> List[RenameOp]:
        """Get valid operations (excluding source=destination)"""
        return [op for op in self.ops if not op.is_same]

    @property
    def unchanged_count(self) -> int:
        """Number of entries that already have the correct name"""
        return len(self.ops) - len(self.valid_ops)

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.valid_ops)

    def add_op(self, index: int, src_name: str, dst_name: str) -> None:
        """Add operation"""
        self.ops.append(RenameOp(index=index, src_name=src_name, dst_name=dst_name))

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Reindex Plan Summary:",
            f"  - Indexed entries: {len(self.ops)}",
            f"  - Index width: {self.width}",
            f"  - Renames: {self.total_count}",
            f"  - Already correct: {self.unchanged_count}",
        ]
        return "\n".join(lines)


class Outcome(Enum):
    """Per-entry execution outcome"""
    ALREADY_CORRECT = "already_correct"
    RENAMED = "renamed"
    FAILED = "failed"
    WOULD_RENAME = "would_rename"   # Dry run only


@dataclass(frozen=True)
class EntryOutcome:
    """Outcome of one rename operation"""
    op: RenameOp
    outcome: Outcome
    error: Optional[str] = None     # Only set for FAILED

    def describe(self) -> str:
        """One-line report for this entry"""
        src, dst = self.op.src_name, self.op.dst_name
        if self.outcome == Outcome.WOULD_RENAME:
            return f"mv {src} {dst}"
        elif self.outcome == Outcome.ALREADY_CORRECT:
            return f"{src}: already has correct file name"
        elif self.outcome == Outcome.RENAMED:
            return f"{src}: successfully renamed to {dst}"
        else:
            return f"{src}: FAILED to rename to {dst}: {self.error}"
