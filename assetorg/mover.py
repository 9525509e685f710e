from pathlib import Path
from typing import List
import shutil

from .default_rules import META_SUFFIX
from .errors import MoveError
from .logger import RunLogger
from .models import FileRecord, MoveResult, Rule
from .utils import is_inside, unique_path

class SafeMover:
    def __init__(self, root: Path, logger: RunLogger, dry_run: bool = True,
                 loose_prefix: bool = False, move_meta: bool = True):
        self.root = root
        self.logger = logger
        self.dry_run = dry_run
        self.loose_prefix = loose_prefix
        self.move_meta = move_meta

    def ensure_target(self, rule: Rule) -> Path:
        dest_dir = self.root / rule.target
        if not dest_dir.exists() and not self.dry_run:
            dest_dir.mkdir(parents=True, exist_ok=True)
            self.logger.log(f"Created folder: {dest_dir}")
        return dest_dir

    def move_one(self, rec: FileRecord, rule: Rule) -> MoveResult:
        if is_inside(rec.rel.parent, rule.target, self.loose_prefix):
            if not self.dry_run:
                self.logger.log(f"Skipped (already in target folder): {rec.path}")
            return MoveResult(rec.path, rec.path, performed=False, reason="already in target folder")

        dest_file = self.root / rule.target / rec.name
        if dest_file.exists():
            dest_file = unique_path(dest_file)
            reason = "exists, renamed"
        else:
            reason = ""

        if self.dry_run:
            return MoveResult(rec.path, dest_file, performed=False, reason=reason)

        # Real move
        try:
            dest_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(rec.path), str(dest_file))
        except OSError as e:
            raise MoveError(f"{rec.path} -> {dest_file}: {e}") from e
        self.logger.log(f"Moved: {rec.path} -> {dest_file}")

        if self.move_meta:
            self._move_companion(rec.path, dest_file)
        return MoveResult(rec.path, dest_file, performed=True, reason=reason)

    def _move_companion(self, src: Path, dest_file: Path) -> None:
        meta = src.with_name(src.name + META_SUFFIX)
        if not meta.is_file():
            return
        meta_dest = dest_file.with_name(dest_file.name + META_SUFFIX)
        if meta_dest.exists():
            self.logger.log(f"Skipped meta (destination exists): {meta}")
            return
        try:
            shutil.move(str(meta), str(meta_dest))
        except OSError as e:
            raise MoveError(f"{meta} -> {meta_dest}: {e}") from e
        self.logger.log(f"Moved meta: {meta} -> {meta_dest}")

    def move_many(self, rule: Rule, files: List[FileRecord]) -> List[MoveResult]:
        self.ensure_target(rule)
        results: List[MoveResult] = []
        for rec in files:
            results.append(self.move_one(rec, rule))
        return results
