from .coordinator import ScanCoordinator
from .report_writer import ReportWriter, render_report
from .scanner import FileScanner
from .walker import FileWalker

__all__ = [
    "ScanCoordinator",
    "ReportWriter",
    "render_report",
    "FileScanner",
    "FileWalker",
]
