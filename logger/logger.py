import json
import os
from datetime import datetime, timezone


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tm_run_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    @staticmethod
    def _stamp(entry):
        return {"timestamp": datetime.now(timezone.utc).isoformat(), **entry}

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(self._stamp(entry)) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(self._stamp(entry)) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC day has changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_summary(self, entries: list):
        """Log run summaries (final status, steps, halt reason)."""
        filename = f"{self.log_file_prefix}{self.today}.jsonl"
        self._log_to_file(filename, [self._stamp(e) for e in entries])

    def log_trace(self, entries: list):
        """Log per-step snapshots of a run."""
        filename = f"trace_{self.today}.jsonl"
        self._log_to_file(filename, entries)

    def log_accepted(self, entries: list):
        """Log inputs and final tapes of runs that reached the accept state."""
        filename = f"accepted_{self.today}.jsonl"
        self._log_to_file(filename, [self._stamp(e) for e in entries])

    def log_rejected(self, entries: list):
        """Log inputs and final tapes of rejected runs, with the reject reason."""
        filename = f"rejected_{self.today}.jsonl"
        self._log_to_file(filename, [self._stamp(e) for e in entries])

    def log_validation(self, result):
        """Log a validation verdict for a transition table."""
        entry = {
            "complete": result.complete,
            "state": result.state,
            "symbol": result.symbol,
            "reason": result.reason,
            "message": result.message,
        }
        self._log_to_file(f"validation_{self.today}.jsonl", [self._stamp(entry)])
