"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Two-phase execution (first rename to temporary name, then to final name)
- Per-entry outcomes; one failure never stops the batch
- dry_run support
"""

from pathlib import Path
from typing import List, Dict, Tuple, Optional, Callable
from dataclasses import dataclass, field
import logging
import os
import uuid

from .models_fs import RenamePlan, RenameOp, Outcome, EntryOutcome
from .safety_checks import check_rename_op

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".__tmp_reindex__"


@dataclass
class RenameResult:
    """Rename execution result, in ranked order"""
    outcomes: List[EntryOutcome] = field(default_factory=list)

    def _count(self, outcome: Outcome) -> int:
        return sum(1 for o in self.outcomes if o.outcome == outcome)

    @property
    def renamed_count(self) -> int:
        return self._count(Outcome.RENAMED)

    @property
    def failed_count(self) -> int:
        return self._count(Outcome.FAILED)

    @property
    def unchanged_count(self) -> int:
        return self._count(Outcome.ALREADY_CORRECT)

    @property
    def preview_count(self) -> int:
        return self._count(Outcome.WOULD_RENAME)

    @property
    def failed(self) -> List[EntryOutcome]:
        return [o for o in self.outcomes if o.outcome == Outcome.FAILED]

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Renamed: {self.renamed_count}",
            f"  - Already correct: {self.unchanged_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.preview_count:
            lines.append(f"  - Would rename: {self.preview_count}")
        return "\n".join(lines)


def _generate_temp_name(original: Path) -> Path:
    """Generate temporary filename (never matches the index convention)"""
    unique_id = uuid.uuid4().hex[:8]
    temp_name = f"{TEMP_PREFIX}{unique_id}__{original.name}"
    return original.parent / temp_name


def _restore(op: RenameOp, temp_path: Path, src: Path, error: str) -> EntryOutcome:
    """Move a temporary file back to its original name after a failed phase 2"""
    # The original name may already have been taken by another entry
    valid, reason = check_rename_op(temp_path, src)
    if not valid:
        logger.error("Cannot restore %s from %s: %s", src.name, temp_path.name, reason)
        return EntryOutcome(op, Outcome.FAILED,
                            f"{error}; restore also failed, file left as {temp_path.name}: {reason}")

    try:
        os.rename(temp_path, src)
    except OSError as e:
        logger.error("Cannot restore %s from %s: %s", src.name, temp_path.name, e)
        error = f"{error}; restore also failed, file left as {temp_path.name}: {e}"
    return EntryOutcome(op, Outcome.FAILED, error)


def execute_plan(
    plan: RenamePlan,
    dry_run: Optional[bool] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> RenameResult:
    """
    Execute rename plan (two-phase)

    Every entry that changes name is first moved to a unique temporary name,
    so no final name can be occupied by another entry of the batch. A final
    name that is still occupied is refused, never overwritten.

    Args:
        plan: Rename plan
        dry_run: Whether to preview only (defaults to plan.options.dry_run)
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    if dry_run is None:
        dry_run = plan.options.dry_run

    result = RenameResult()
    valid_ops = plan.valid_ops
    total = len(valid_ops)

    if dry_run:
        # Preview mode only; unchanged entries are not reported
        for i, op in enumerate(valid_ops):
            if progress_callback:
                progress_callback(i + 1, total, f"[Preview] {op.src_name} -> {op.dst_name}")
            result.outcomes.append(EntryOutcome(op, Outcome.WOULD_RENAME))
        return result

    directory = plan.directory
    outcomes: Dict[int, EntryOutcome] = {}

    for op in plan.ops:
        if op.is_same:
            outcomes[op.index] = EntryOutcome(op, Outcome.ALREADY_CORRECT)

    # Phase 1: Rename all to temporary names
    temp_mapping: List[Tuple[RenameOp, Path]] = []

    for i, op in enumerate(valid_ops):
        if progress_callback:
            progress_callback(i + 1, total * 2, f"[Phase 1] {op.src_name} -> temp name")

        src = directory / op.src_name
        temp_path = _generate_temp_name(src)

        valid, error = check_rename_op(src, temp_path)
        if not valid:
            outcomes[op.index] = EntryOutcome(op, Outcome.FAILED, error)
            continue

        try:
            os.rename(src, temp_path)
            temp_mapping.append((op, temp_path))
        except OSError as e:
            logger.debug("Phase 1 failed for %s: %s", op.src_name, e)
            outcomes[op.index] = EntryOutcome(op, Outcome.FAILED, str(e))

    # Phase 2: Rename from temporary names to final names
    for i, (op, temp_path) in enumerate(temp_mapping):
        if progress_callback:
            progress_callback(total + i + 1, total * 2, f"[Phase 2] temp name -> {op.dst_name}")

        src = directory / op.src_name
        dst = directory / op.dst_name

        valid, error = check_rename_op(temp_path, dst)
        if not valid:
            outcomes[op.index] = _restore(op, temp_path, src, error)
            continue

        try:
            os.rename(temp_path, dst)
            outcomes[op.index] = EntryOutcome(op, Outcome.RENAMED)
        except OSError as e:
            logger.debug("Phase 2 failed for %s: %s", op.src_name, e)
            outcomes[op.index] = _restore(op, temp_path, src, str(e))

    result.outcomes = [outcomes[op.index] for op in plan.ops]
    logger.debug("Executed plan for %s: %d renamed, %d failed",
                 directory, result.renamed_count, result.failed_count)
    return result
