import json
import os
from datetime import datetime, timezone

from simulator.records import MachineStatus

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="trmsim_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    @staticmethod
    def _stamp(entry):
        return {"timestamp": datetime.now(timezone.utc).isoformat(), **entry}

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(self._stamp(entry)) + "\n")

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
        """Force start a new main log file."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_run(self, model_name, text, result):
        """Log the summary of one finished run."""
        entry = {"model": model_name, "input": text}
        entry.update(result.to_dict())
        self.log(entry)

    def log_trace(self, records: list):
        """Log every step record of a verbose run."""
        self._log_to_file(f"trace_{self.today}.jsonl", [r.to_dict() for r in records])

    def log_outcomes(self, entries: list):
        """Split run entries into accepted / rejected / undecided files by status."""
        buckets = {}
        for entry in entries:
            buckets.setdefault(MachineStatus(entry["status"]).outcome or "unfinished", []).append(entry)
        for outcome, bucket in buckets.items():
            self._log_to_file(f"{outcome}_{self.today}.jsonl", bucket)

