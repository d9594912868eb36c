"""
Per-session logger for automation runs.

Purpose:
- Keep an in-memory list of log entries for one automation session
- Echo every entry to the Python logger so it shows up in the service logs
- Append entries as JSON lines to <log_dir>/<config_id>-<date>.jsonl for live tailing
- Write a session report (<config_id>-report-<timestamp>.json) at the end of a run

Usage:
    log = AutomationLogger("test-automation", log_dir="automation-logs")
    log.info("Navigating to login page")
    log.success("Logged in")
    log.save_session_report()
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from config.settings import settings
from models.automation import AutomationLogEntry, LogLevel

logger = logging.getLogger(__name__)

_PY_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class AutomationLogger:
    """Collects entries for a single automation session."""

    def __init__(self, config_id: str, log_dir: str | Path | None = None, verbose: bool | None = None):
        self.config_id = config_id
        self.entries: list[AutomationLogEntry] = []
        self.started_at = datetime.now(timezone.utc)
        self.verbose = settings.VERBOSE_LOGGING if verbose is None else verbose
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def log_file(self) -> Path | None:
        if self.log_dir is None:
            return None
        return self.log_dir / f"{self.config_id}-{self.started_at:%Y-%m-%d}.jsonl"

    def log(self, level: LogLevel, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        entry = AutomationLogEntry(level=level, action=action, details=details, job_id=job_id, config_id=self.config_id)
        self.entries.append(entry)

        logger.log(_PY_LEVELS[level], "[%s] %s: %s", self.config_id, level.upper(), action)
        if details is not None and self.verbose:
            logger.log(_PY_LEVELS[level], "[%s]   details: %s", self.config_id, details)

        self._append_to_file(entry)
        return entry

    def info(self, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        return self.log("info", action, details, job_id)

    def success(self, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        return self.log("success", action, details, job_id)

    def warning(self, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        return self.log("warning", action, details, job_id)

    def error(self, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        return self.log("error", action, details, job_id)

    def debug(self, action: str, details: Any = None, job_id: str | None = None) -> AutomationLogEntry:
        return self.log("debug", action, details, job_id)

    def summary(self) -> dict:
        counts = {level: 0 for level in _PY_LEVELS}
        for entry in self.entries:
            counts[entry.level] += 1
        return {
            "configId": self.config_id,
            "startedAt": self.started_at.isoformat(),
            "finishedAt": datetime.now(timezone.utc).isoformat(),
            "totalEntries": len(self.entries),
            "counts": counts,
        }

    def save_session_report(self) -> Path | None:
        """Write the summary plus every entry; returns the report path (None without a log dir)."""
        if self.log_dir is None:
            return None
        report = self.summary()
        report["entries"] = [entry.model_dump(mode="json", by_alias=True) for entry in self.entries]
        path = self.log_dir / f"{self.config_id}-report-{datetime.now(timezone.utc):%Y%m%dT%H%M%S%f}.json"
        path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Automation session report saved to %s", path)
        return path

    def _append_to_file(self, entry: AutomationLogEntry) -> None:
        if self.log_file is None:
            return
        try:
            with self.log_file.open("a", encoding="utf-8") as fh:
                fh.write(entry.model_dump_json(by_alias=True) + "\n")
        except OSError:
            logger.warning("Could not write automation log to %s", self.log_file, exc_info=True)
