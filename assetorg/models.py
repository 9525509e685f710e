from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from datetime import datetime
from typing import List, Tuple

@dataclass(frozen=True)
class Rule:
    pattern: str  # glob on the file name, e.g. "*.png"
    target: str   # folder relative to the asset root, "/" separated

    def matches(self, name: str) -> bool:
        return fnmatchcase(name.lower(), self.pattern.lower())

@dataclass(frozen=True)
class FileRecord:
    path: Path
    rel: Path  # relative to the asset root
    name: str
    size: int

@dataclass(frozen=True)
class MoveResult:
    src: Path
    dst: Path
    performed: bool  # False if dry-run or skipped
    reason: str = ""  # e.g. "exists, renamed", "already in target folder"


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    message: str

    def render(self) -> str:
        return f"[{self.timestamp:%Y-%m-%d %H:%M:%S}] {self.message}"


@dataclass(frozen=True)
class StageResult:
    name: str
    ok: bool
    reason: str = ""
    moves: Tuple[MoveResult, ...] = field(default_factory=tuple)

    @property
    def moved(self) -> int:
        return sum(1 for m in self.moves if m.performed)


@dataclass
class RunReport:
    backup: StageResult
    stages: List[StageResult]
    log_path: Path
    log_written: bool = False
    refreshed: bool = False
    refresh_error: str = ""

    @property
    def ok(self) -> bool:
        # Backup is best effort; only the move stages decide the outcome.
        return all(s.ok for s in self.stages)

    @property
    def moved(self) -> int:
        return sum(s.moved for s in self.stages)
