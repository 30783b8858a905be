# session_logger.py
"""
Class: SessionLogger

Writes every report event of one decoder session to a CSV file.
Each session gets its own file named from the UTC start time
(session_YYYYmmdd_HHMMSS.csv) inside log_dir, which is created if missing.
Rows are flushed as they are written so a crashed session still leaves
its log behind.
"""
import csv
import logging
import os
from datetime import datetime, timezone

from .reports import FinalReport, ReportEvent, event_type

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "log_timestamp_utc",
    "event_type",
    "line",
    "original",
    "decoded",
    "delta",
    "head",
    "payload",
    "notes",
]


class SessionLogger:
    def __init__(self, log_dir: str):
        os.makedirs(log_dir, exist_ok=True)
        self.filepath = os.path.join(log_dir, self._generate_filename())
        self.file = open(self.filepath, 'w', newline='', encoding='utf-8')
        self.writer = csv.DictWriter(self.file, fieldnames=FIELDNAMES)
        self.writer.writeheader()
        logger.info(f"Session event log: {self.filepath}")

    def _generate_filename(self) -> str:
        now = datetime.now(timezone.utc)
        return f"session_{now.strftime('%Y%m%d_%H%M%S')}.csv"

    def handle(self, event: ReportEvent) -> None:
        row = {key: "" for key in FIELDNAMES}
        row["log_timestamp_utc"] = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        row["event_type"] = event_type(event)
        if isinstance(event, FinalReport):
            row["payload"] = event.message
            row["notes"] = f"frames={event.frames_processed} malformed={event.malformed}"
        else:
            fields = event._asdict()
            if "reason" in fields:
                row["notes"] = fields.pop("reason")
            row.update(fields)
        self.writer.writerow(row)
        self.file.flush()

    def close(self) -> None:
        if not self.file.closed:
            self.file.close()
