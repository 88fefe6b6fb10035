"""
gui_workers.py - GUI Worker Threads

Provides background execution of scanning and renaming to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    scan_directory, plan_reindex, execute_plan,
    ReindexOptions, RenamePlan
)


class PlanWorker(QThread):
    """Scan a directory and build its reindex plan"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object, object)   # RenamePlan, ScanResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        directory: Path,
        options: Optional[ReindexOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options or ReindexOptions()

    def run(self):
        try:
            self.progress.emit(f"Scanning {self.directory}...")
            scan = scan_directory(self.directory, progress_callback=self.progress.emit)

            self.progress.emit("Generating rename plan...")
            plan = plan_reindex(scan.entries, self.options, self.directory)

            self.finished.emit(plan, scan)
        except OSError as e:
            self.error.emit(f"An error occurred while reading the directory: {e}")


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: RenamePlan,
        dry_run: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.dry_run = dry_run

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_plan(
                self.plan,
                dry_run=self.dry_run,
                progress_callback=progress_callback,
            )

            self.finished.emit(result)
        except OSError as e:
            self.error.emit(str(e))
