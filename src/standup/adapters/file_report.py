"""File-based report storage adapter."""

import logging
from pathlib import Path

from standup.errors import WriteError

logger = logging.getLogger(__name__)

REPORT_FILE_MODE = 0o644


class FileReportWriter:
    """
    File-based report sink.

    Implements ReportSink protocol. Overwrites a single file per run.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def write(self, report: str) -> None:
        """Overwrite the report file with the exact report text."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(report, encoding="utf-8")
            self.path.chmod(REPORT_FILE_MODE)
        except OSError as e:
            logger.error(f"Failed to write report to {self.path}: {e}")
            raise WriteError(f"Could not write report to {self.path}: {e}") from e
        logger.info(f"Report written to {self.path}")
