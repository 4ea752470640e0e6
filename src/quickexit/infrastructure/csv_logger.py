"""CSV logger for excuse generation metrics."""

import csv
import threading
from datetime import UTC, datetime
from pathlib import Path

CSV_HEADER = ["timestamp", "operation", "duration_ms", "category", "tone", "source"]


class CSVLogger:
    """Thread-safe CSV logger for appending generation timings."""

    def __init__(self, filepath: str | Path) -> None:
        """Initialize CSV logger.

        Args:
            filepath: Path to CSV file (will be created if doesn't exist)
        """
        self.filepath = Path(filepath)
        self._lock = threading.Lock()
        self._ensure_directory()

    def _ensure_directory(self) -> None:
        """Ensure the parent directory exists."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def _write_header_if_needed(self) -> None:
        """Write CSV header if file doesn't exist or is empty."""
        if not self.filepath.exists() or self.filepath.stat().st_size == 0:
            with open(self.filepath, "w", newline="") as f:
                csv.writer(f).writerow(CSV_HEADER)

    def log(
        self,
        operation: str,
        duration_ms: float,
        category: str = "",
        tone: str = "",
        source: str = "",
    ) -> None:
        """Append one metric row.

        Args:
            operation: Name of the operation (e.g., "generate_excuse")
            duration_ms: Duration in milliseconds
            category: Excuse category the operation ran for (optional)
            tone: Excuse tone the operation ran for (optional)
            source: Provenance of the result, "ai" or "fallback" (optional)
        """
        with self._lock:
            self._write_header_if_needed()
            with open(self.filepath, "a", newline="") as f:
                csv.writer(f).writerow([
                    datetime.now(UTC).isoformat(),
                    operation,
                    f"{duration_ms:.2f}",
                    str(category),
                    str(tone),
                    str(source),
                ])


def build_metrics_logger(path: str) -> CSVLogger | None:
    """Create a metrics logger for the configured path, or None when disabled."""
    if not path:
        return None
    return CSVLogger(path)
