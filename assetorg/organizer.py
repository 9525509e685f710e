"""Backup-then-reorganize pipeline for an asset tree."""
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from .backup import ScriptBackup
from .classifier import Classifier, RuleSet
from .default_rules import BACKUP_ARCHIVE_NAME, BACKUP_PATTERN, LOG_FILE_NAME
from .errors import MoveError
from .logger import RunLogger
from .models import FileRecord, MoveResult, Rule, RunReport, StageResult
from .mover import SafeMover
from .scanner import FolderScanner
from .utils import ensure_path

RefreshHook = Callable[[Path], None]


class Organizer:
    """
    Runs reorganizations of `root`.

    The backup archive and the log file default to siblings of the root
    folder. With `snapshot` (the default) the tree is scanned once and every
    file is handed to the first rule that matches it. Without it, each rule
    rescans the live tree, so a file matched by two rules is moved twice.
    Every `run()` starts a new log; `self.logger` holds the latest one.
    """

    def __init__(self, root, rules: Optional[Iterable[Rule]] = None,
                 backup_path: Optional[Path] = None, log_path: Optional[Path] = None,
                 snapshot: bool = True, loose_prefix: bool = False, move_meta: bool = True,
                 refresh: Optional[RefreshHook] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.root = ensure_path(root)
        self.rule_set = RuleSet(rules)
        self.backup_path = Path(backup_path) if backup_path else self.root.parent / BACKUP_ARCHIVE_NAME
        self.log_path = Path(log_path) if log_path else self.root.parent / LOG_FILE_NAME
        self.snapshot = snapshot
        self.loose_prefix = loose_prefix
        self.move_meta = move_meta
        self.refresh = refresh
        self.clock = clock
        self.logger = RunLogger(clock)

    def _mover(self, dry_run: bool) -> SafeMover:
        return SafeMover(self.root, self.logger, dry_run=dry_run,
                         loose_prefix=self.loose_prefix, move_meta=self.move_meta)

    def _snapshot_groups(self) -> List[Tuple[Rule, List[FileRecord]]]:
        files = FolderScanner(self.root).scan()
        return Classifier(self.rule_set).group(files)

    def plan(self) -> List[MoveResult]:
        """Dry run: where each file would go, without touching the tree."""
        mover = self._mover(dry_run=True)
        previews: List[MoveResult] = []
        for rule, files in self._snapshot_groups():
            previews.extend(mover.move_many(rule, files))
        return previews

    def run(self) -> RunReport:
        self.logger = log = RunLogger(self.clock)
        log.log("OrganizeAssets started.")

        backup = ScriptBackup(self.root, self.backup_path, BACKUP_PATTERN, log).run()
        stages = self._move_stage()

        report = RunReport(backup=backup, stages=stages, log_path=self.log_path)
        if report.ok:
            self._refresh(report)
            log.log(f"OrganizeAssets completed. Moved {report.moved} files.")
        else:
            log.log("OrganizeAssets aborted after a move failure.")

        report.log_written = log.flush(self.log_path)
        return report

    def _refresh(self, report: RunReport) -> None:
        if self.refresh is None:
            return
        try:
            self.refresh(self.root)
        except Exception as e:
            # The moves are done; a failing host hook only costs the refresh.
            report.refresh_error = str(e)
            self.logger.log(f"Refresh failed: {e}")
            print(f"Refresh failed: {e}", file=sys.stderr)
            return
        report.refreshed = True

    def _move_stage(self) -> List[StageResult]:
        mover = self._mover(dry_run=False)
        if self.snapshot:
            try:
                groups = self._snapshot_groups()
            except OSError as e:
                self.logger.log(f"Scan failed: {e}")
                return [StageResult("scan", ok=False, reason=str(e))]
        else:
            groups = [(rule, None) for rule in self.rule_set]

        stages: List[StageResult] = []
        for rule, files in groups:
            name = f"{rule.pattern} -> {rule.target}"
            moves: List[MoveResult] = []
            try:
                mover.ensure_target(rule)
                if files is None:
                    files = FolderScanner(self.root, rule.pattern).scan()
                for rec in files:
                    moves.append(mover.move_one(rec, rule))
            except (MoveError, OSError) as e:
                self.logger.log(f"Move failed: {e}")
                stages.append(StageResult(name, ok=False, reason=str(e), moves=tuple(moves)))
                # Remaining rules are not applied.
                break
            stages.append(StageResult(name, ok=True, moves=tuple(moves)))
        return stages


def organize(root, refresh: Optional[RefreshHook] = None, **kwargs) -> RunReport:
    """Back up scripts under root, then move files into their target folders."""
    return Organizer(root, refresh=refresh, **kwargs).run()
