import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Callable, List, Optional

from .models import LogEntry

class RunLogger:
    """
    Collects timestamped lines for one run and writes them out in one go.

    One instance per run is handed to every stage; nothing is shared between
    runs. The log file is replaced on each flush, never appended to.
    """
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now
        self.entries: List[LogEntry] = []

    def log(self, message: str) -> LogEntry:
        entry = LogEntry(self.clock(), message)
        self.entries.append(entry)
        return entry

    def lines(self) -> List[str]:
        return [e.render() for e in self.entries]

    def render(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def flush(self, path: Path) -> bool:
        """Write the log to path. Failures go to stderr only, never raise."""
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(self.render(), encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            print(f"Failed to write log file: {e}", file=sys.stderr)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass  # already reported above
            return False
        print(f"Log file created at: {path}")
        return True
