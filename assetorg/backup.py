import shutil
import sys
import tempfile
import zipfile
from pathlib import Path

from .errors import AssetOrgError
from .logger import RunLogger
from .models import StageResult
from .scanner import FolderScanner
from .utils import check_free_space

BACKUP_ERRORS = (OSError, ValueError, AssetOrgError, zipfile.BadZipFile, zipfile.LargeZipFile)

class ScriptBackup:
    """
    Zips every file matching `pattern` under `root` into `archive_path`.

    Files are staged in a throwaway directory at their path relative to root,
    then the staging tree is compressed. Any previous archive is removed first.
    The stage is best effort: failures are logged and reported, not raised,
    and a half-written archive is removed.
    """
    def __init__(self, root: Path, archive_path: Path, pattern: str, logger: RunLogger):
        self.root = root
        self.archive_path = archive_path
        self.pattern = pattern
        self.logger = logger

    def run(self) -> StageResult:
        try:
            count = self._create()
        except BACKUP_ERRORS as e:
            self.logger.log(f"Backup failed: {e}")
            print(f"Backup failed: {e}", file=sys.stderr)
            self._discard_partial()
            return StageResult("backup", ok=False, reason=str(e))
        return StageResult("backup", ok=True, reason=f"{count} files archived")

    def _discard_partial(self) -> None:
        try:
            if self.archive_path.is_file():
                self.archive_path.unlink()
                self.logger.log(f"Partial backup archive removed: {self.archive_path}")
        except OSError as e:
            self.logger.log(f"Could not remove partial backup archive: {e}")

    def _create(self) -> int:
        if self.archive_path.exists():
            self.archive_path.unlink()
            self.logger.log("Old backup archive deleted.")

        files = FolderScanner(self.root, self.pattern).scan()
        check_free_space(self.archive_path.parent, sum(f.size for f in files))

        with tempfile.TemporaryDirectory(prefix="ScriptsBackup-") as tmp:
            staging = Path(tmp)
            for rec in files:
                dest = staging / rec.rel
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(rec.path, dest)

            # Files dated before 1980 are stored with the earliest zip timestamp.
            with zipfile.ZipFile(self.archive_path, "w", zipfile.ZIP_DEFLATED,
                                 strict_timestamps=False) as zf:
                for f in sorted(staging.rglob("*")):
                    if f.is_file():
                        zf.write(f, f.relative_to(staging).as_posix())
            self.logger.log(f"Backup archive created at: {self.archive_path} ({len(files)} files)")

        self.logger.log("Temporary backup folder deleted.")
        return len(files)
