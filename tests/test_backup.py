import zipfile

from assetorg.backup import ScriptBackup

from conftest import make_file


def test_archive_holds_every_script_at_its_relative_path(tmp_path, asset_root, logger):
    make_file(asset_root, "Foo.cs", "class Foo {}")
    make_file(asset_root, "Sub/Deep/Bar.cs", "class Bar {}")
    make_file(asset_root, "image.png")
    archive = tmp_path / "ScriptsBackup.zip"

    result = ScriptBackup(asset_root, archive, "*.cs", logger).run()

    assert result.ok
    with zipfile.ZipFile(archive) as zf:
        assert sorted(zf.namelist()) == ["Foo.cs", "Sub/Deep/Bar.cs"]
        zf.extractall(tmp_path / "restored")
    for rel in ("Foo.cs", "Sub/Deep/Bar.cs"):
        assert (tmp_path / "restored" / rel).read_bytes() == (asset_root / rel).read_bytes()


def test_previous_archive_is_replaced(tmp_path, asset_root, logger):
    make_file(asset_root, "Foo.cs")
    archive = tmp_path / "ScriptsBackup.zip"
    archive.write_text("not a zip")

    assert ScriptBackup(asset_root, archive, "*.cs", logger).run().ok

    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == ["Foo.cs"]
    messages = [e.message for e in logger.entries]
    assert messages[0] == "Old backup archive deleted."
    assert messages[-1] == "Temporary backup folder deleted."


def test_empty_tree_gives_empty_archive(tmp_path, asset_root, logger):
    archive = tmp_path / "ScriptsBackup.zip"
    assert ScriptBackup(asset_root, archive, "*.cs", logger).run().ok
    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == []


def test_failure_is_logged_not_raised(tmp_path, asset_root, logger, capsys):
    make_file(asset_root, "Foo.cs")
    blocker = make_file(tmp_path, "blocker")
    archive = blocker / "ScriptsBackup.zip"

    result = ScriptBackup(asset_root, archive, "*.cs", logger).run()

    assert not result.ok
    assert result.reason
    assert logger.entries[-1].message.startswith("Backup failed: ")
    assert "Backup failed" in capsys.readouterr().err
    assert (asset_root / "Foo.cs").exists()


def test_partial_archive_removed_on_failure(tmp_path, asset_root, logger, monkeypatch):
    make_file(asset_root, "Foo.cs")
    archive = tmp_path / "ScriptsBackup.zip"

    def broken_write(self, filename, arcname=None, *args, **kwargs):
        raise ValueError("cannot store entry")

    monkeypatch.setattr(zipfile.ZipFile, "write", broken_write)
    result = ScriptBackup(asset_root, archive, "*.cs", logger).run()

    assert not result.ok
    assert result.reason == "cannot store entry"
    assert not archive.exists()
    assert "Partial backup archive removed" in logger.entries[-1].message
