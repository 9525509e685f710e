from pathlib import Path, PurePosixPath
import shutil
from typing import Union

from .errors import InvalidPathError, InsufficientSpaceError

def ensure_path(path_str: Union[str, Path]) -> Path:
    """Return a resolved Path object and ensure it is an existing directory."""
    p = Path(path_str).expanduser().resolve()
    if not p.exists():
        raise InvalidPathError(f"Path does not exist: {p}")
    if not p.is_dir():
        raise InvalidPathError(f"Not a directory: {p}")
    return p


def unique_path(dest: Path) -> Path:
    """
    If dest exists, append '_1', '_2', ... before the suffix.
    Returns a Path that does not exist.
    """
    if not dest.exists():
        return dest

    stem = dest.stem
    suffix = dest.suffix
    parent = dest.parent
    i = 1
    while True:
        candidate = parent / f"{stem}_{i}{suffix}"
        if not candidate.exists():
            return candidate
        i += 1


def is_inside(rel_dir: Path, target: str, loose_prefix: bool = False) -> bool:
    """
    True if rel_dir (relative to the asset root) lies in target.

    Compares whole path segments, so "ScriptsOld" is not inside "Scripts".
    With loose_prefix the plain string prefix test is used instead, which
    treats any folder whose name starts with target as inside it.
    """
    rel_posix = PurePosixPath(rel_dir.as_posix())
    if loose_prefix:
        text = "" if str(rel_posix) == "." else str(rel_posix)
        return text.startswith(target)

    target_parts = PurePosixPath(target).parts
    return rel_posix.parts[:len(target_parts)] == target_parts


def check_free_space(dest: Path, required_bytes: int) -> None:
    total, used, free = shutil.disk_usage(dest)
    if free < required_bytes:
        raise InsufficientSpaceError(
            f"Not enough disk space at {dest}: need {required_bytes} bytes, {free} free."
        )
