"""
gui_mainwindow.py - GUI Main Window

Single page: pick a directory, preview the renumbering, execute it
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QSpinBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    RenamePlan, RenameResult, ReindexOptions, ScanResult, Outcome
)
from .gui_workers import PlanWorker, RenameWorker

STATUS_COLORS = {
    Outcome.ALREADY_CORRECT: QColor(150, 150, 150),
    Outcome.RENAMED: QColor(0, 150, 0),
    Outcome.FAILED: QColor(200, 0, 0),
    Outcome.WOULD_RENAME: QColor(0, 150, 0),
}


class ReindexWidget(QWidget):
    """Reindex settings, preview table and execution"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        settings_group = QGroupBox("Settings")
        settings_layout = QGridLayout(settings_group)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select directory with <index>-<name> files...")
        self.dir_edit.setText(str(Path.cwd()))
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        settings_layout.addWidget(QLabel("Minimum Width:"), 1, 0)
        self.width_spin = QSpinBox()
        self.width_spin.setRange(0, 20)
        self.width_spin.setValue(ReindexOptions().min_width)
        settings_layout.addWidget(self.width_spin, 1, 1)

        self.dry_run_check = QCheckBox("Dry Run (preview only)")
        settings_layout.addWidget(self.dry_run_check, 1, 2)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 2, 0, 1, 3)

        layout.addWidget(settings_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _set_busy(self, busy: bool):
        self.preview_btn.setEnabled(not busy)
        self.browse_btn.setEnabled(not busy)
        self.progress_bar.setVisible(busy)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory", self.dir_edit.text())
        if directory:
            self.dir_edit.setText(directory)

    def _do_preview(self):
        """Scan directory and generate preview"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        options = ReindexOptions(
            dry_run=self.dry_run_check.isChecked(),
            min_width=self.width_spin.value(),
        )

        self._set_busy(True)
        self.execute_btn.setEnabled(False)
        self.preview_btn.setText("Scanning...")
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.plan_worker = PlanWorker(path, options)
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object, object)
    def _on_plan_finished(self, plan: RenamePlan, scan: ScanResult):
        """Plan generation complete"""
        self.plan = plan
        self._set_busy(False)
        self.preview_btn.setText("Preview")

        if scan.errors:
            QMessageBox.warning(self, "Warning", "\n".join(scan.errors[:10]))

        self.table.setRowCount(len(plan.ops))
        for i, op in enumerate(plan.ops):
            self.table.setItem(i, 0, QTableWidgetItem(op.src_name))
            self.table.setItem(i, 1, QTableWidgetItem(op.dst_name))
            if op.is_same:
                status = QTableWidgetItem("No Change")
                status.setForeground(STATUS_COLORS[Outcome.ALREADY_CORRECT])
            else:
                status = QTableWidgetItem("Will Rename")
                status.setForeground(STATUS_COLORS[Outcome.WOULD_RENAME])
            self.table.setItem(i, 2, status)

        if plan.valid_ops and not plan.options.dry_run:
            self.execute_btn.setEnabled(True)

        if plan.valid_ops:
            self.status_label.setText(
                f"Will perform {plan.total_count} rename operations "
                f"(index width: {plan.width}, unmatched entries: {scan.unmatched})"
            )
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self._set_busy(False)
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.valid_ops:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.total_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._set_busy(True)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.progress_bar.setRange(0, self.plan.total_count * 2)

        self.rename_worker = RenameWorker(self.plan, dry_run=False)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        self._set_busy(False)
        self.execute_btn.setText("Execute Rename")

        # Rows are in ranked order, same as the outcomes
        for i, outcome in enumerate(result.outcomes):
            status = QTableWidgetItem(outcome.outcome.name.replace("_", " ").title())
            status.setForeground(STATUS_COLORS[outcome.outcome])
            if outcome.error:
                status.setToolTip(outcome.error)
            self.table.setItem(i, 2, status)

        msg = f"Rename complete!\n\nRenamed: {result.renamed_count}\nFailed: {result.failed_count}"
        if result.failed_count > 0:
            msg += "\n\nFailure Details:\n"
            for outcome in result.failed[:5]:
                msg += f"  {outcome.describe()}\n"
            if result.failed_count > 5:
                msg += f"  ... and {result.failed_count - 5} more failures"

        QMessageBox.information(self, "Complete", msg)

        self.plan = None
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        self._set_busy(False)
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Execute Rename")
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Reindex Tool")
        self.setMinimumSize(800, 600)

        self.reindex_widget = ReindexWidget()
        self.setCentralWidget(self.reindex_widget)

        self.statusBar().showMessage("Ready")
