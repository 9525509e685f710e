import sys

from assetorg.default_rules import DEFAULT_ASSET_ROOT
from assetorg.errors import InvalidPathError
from assetorg.organizer import Organizer

def ask_yes_no(prompt: str) -> bool:
    return input(prompt + " [y/N]: ").strip().lower() == "y"

def report_refresh(root):
    print(f"\nAsset tree under {root} changed; refresh the editor's asset database.")

def organize_flow() -> int:
    root_input = input(f"Asset root (blank = ./{DEFAULT_ASSET_ROOT}): ").strip()
    try:
        organizer = Organizer(root_input or DEFAULT_ASSET_ROOT, refresh=report_refresh)
    except InvalidPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Dry-run
    previews = organizer.plan()
    pending = [r for r in previews if r.reason != "already in target folder"]
    print("\n--- DRY RUN --- (first 30 shown)")
    for r in pending[:30]:
        flag = f"({r.reason})" if r.reason else ""
        print(f"{r.src.name:40} -> {r.dst} {flag}")
    print(f"\nTotal files planned: {len(pending)}")
    print(f"Scripts will be backed up to {organizer.backup_path} first.")

    if not ask_yes_no("Proceed with reorganizing?"):
        print("Aborted (dry-run only).")
        return 0

    report = organizer.run()

    if not report.backup.ok:
        print(f"Warning: backup failed ({report.backup.reason}); files were moved anyway.")
    if report.refresh_error:
        print(f"Warning: asset refresh failed ({report.refresh_error}).", file=sys.stderr)
    failed = [s for s in report.stages if not s.ok]
    if failed:
        print(f"Error: {failed[0].name} failed: {failed[0].reason}", file=sys.stderr)
        print(f"Moved {report.moved} files before stopping.", file=sys.stderr)
        return 1

    print(f"\nDone. Moved {report.moved} files.")
    return 0

def main():
    sys.exit(organize_flow())

if __name__ == "__main__":
    main()
