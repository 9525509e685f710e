from pathlib import Path
from typing import Iterable, List
from .models import FileRecord, Rule

class FolderScanner:
    """Scans a folder (optionally recursively) for files matching a glob pattern."""

    def __init__(self, root: Path, pattern: str = "*", recursive: bool = True,
                 ignore_hidden: bool = True):
        self.root = root
        self.rule = Rule(pattern, "")
        self.recursive = recursive
        self.ignore_hidden = ignore_hidden

    def scan(self) -> List[FileRecord]:
        paths: Iterable[Path]
        if self.recursive:
            paths = self.root.rglob("*")
        else:
            paths = self.root.glob("*")

        files: List[FileRecord] = []
        for p in sorted(paths):
            if not p.is_file():
                continue
            rel = p.relative_to(self.root)
            if self.ignore_hidden and any(part.startswith('.') for part in rel.parts):
                continue
            if not self.rule.matches(p.name):
                continue

            files.append(
                FileRecord(
                    path=p,
                    rel=rel,
                    name=p.name,
                    size=p.stat().st_size,
                )
            )
        return files
