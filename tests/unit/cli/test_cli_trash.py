"""Unit tests for the trash and undo commands.

These run against real temporary directories; only the trash location
is redirected with ``--trash-dir``.
"""

from pathlib import Path

import pytest
from click.testing import Result
from rem.cli.main import app
from rem.core.paths import get_lock_path
from rem.trash.ledger import Ledger, ledger_lock
from typer.testing import CliRunner

runner = CliRunner()


def _invoke(trash_dir: Path, *args: str) -> Result:
    return runner.invoke(app, ["--trash-dir", str(trash_dir), *args])


class TestTrashCommand:
    """Tests for rem trash."""

    def test_trash_file(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "notes.txt"
        source.write_text("notes")

        result = _invoke(trash_dir, "trash", str(source))

        assert result.exit_code == 0
        assert f"Trashed {source}" in result.output
        assert f"Undo using rem undo {source}" in result.output
        assert not source.exists()
        assert (trash_dir / "notes.txt").read_text() == "notes"

    def test_trash_relative_path(self, work_dir: Path, trash_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(work_dir)
        (work_dir / "a.txt").write_text("x")

        result = _invoke(trash_dir, "trash", "a.txt")

        assert result.exit_code == 0
        assert Ledger.load(trash_dir / ".trash.json").originals() == [str(work_dir / "a.txt")]

    def test_trash_several(self, work_dir: Path, trash_dir: Path) -> None:
        paths = [work_dir / "a", work_dir / "b"]
        paths[0].write_text("a")
        paths[1].mkdir()

        result = _invoke(trash_dir, "trash", *map(str, paths))

        assert result.exit_code == 0
        assert not any(p.exists() for p in paths)

    def test_missing_path_fails(self, work_dir: Path, trash_dir: Path) -> None:
        result = _invoke(trash_dir, "trash", str(work_dir / "ghost"))

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_failure_does_not_stop_other_paths(self, work_dir: Path, trash_dir: Path) -> None:
        good = work_dir / "good.txt"
        good.write_text("x")

        result = _invoke(trash_dir, "trash", str(work_dir / "ghost"), str(good))

        assert result.exit_code == 1
        assert not good.exists()

    def test_force_ignores_missing(self, work_dir: Path, trash_dir: Path) -> None:
        result = _invoke(trash_dir, "trash", "--force", str(work_dir / "ghost"))

        assert result.exit_code == 0
        assert "Trashed" not in result.output

    def test_same_name_reports_stored_name(self, work_dir: Path, trash_dir: Path) -> None:
        for sub in ["x", "y"]:
            (work_dir / sub).mkdir()
            (work_dir / sub / "same.txt").write_text(sub)
        _invoke(trash_dir, "trash", str(work_dir / "x" / "same.txt"))

        result = _invoke(trash_dir, "trash", str(work_dir / "y" / "same.txt"))

        assert result.exit_code == 0
        assert f"Stored in the trash as {trash_dir / 'same.txt'} " in result.output
        assert "To avoid conflicts" not in result.output

    def test_same_path_twice_warns_about_new_key(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("1")
        _invoke(trash_dir, "trash", str(source))
        source.write_text("2")

        result = _invoke(trash_dir, "trash", str(source))

        assert result.exit_code == 0
        assert f"To avoid conflicts, {source} will now be restored as {source} " in result.output
        assert f'Undo using rem undo "{source} ' in result.output
        assert len(Ledger.load(trash_dir / ".trash.json")) == 2

    def test_quiet_suppresses_success_output(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("x")

        result = runner.invoke(app, ["-q", "-t", str(trash_dir), "trash", str(source)])

        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_trash_dir_from_environment(self, work_dir: Path, tmp_path: Path) -> None:
        env_trash = tmp_path / "env-trash"
        source = work_dir / "a.txt"
        source.write_text("x")

        result = runner.invoke(app, ["trash", str(source)], env={"REM_TRASH_DIR": str(env_trash)})

        assert result.exit_code == 0
        assert (env_trash / "a.txt").exists()

    def test_refuses_trash_contents(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("x")
        _invoke(trash_dir, "trash", str(source))

        result = _invoke(trash_dir, "trash", str(trash_dir / "a.txt"))

        assert result.exit_code == 1
        assert "already in the trash" in result.output

    def test_locked_trash(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("x")

        with ledger_lock(get_lock_path(trash_dir)):
            result = _invoke(trash_dir, "trash", str(source))

        assert result.exit_code == 1
        assert "Another rem process" in result.output
        assert source.exists()

    def test_corrupt_ledger(self, work_dir: Path, trash_dir: Path) -> None:
        trash_dir.mkdir()
        (trash_dir / ".trash.json").write_text("garbage")
        source = work_dir / "a.txt"
        source.write_text("x")

        result = _invoke(trash_dir, "trash", str(source))

        assert result.exit_code == 1
        assert "corrupt" in result.output
        assert source.exists()


class TestUndoCommand:
    """Tests for rem undo."""

    def test_undo_restores(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("x")
        _invoke(trash_dir, "trash", str(source))

        result = _invoke(trash_dir, "undo", str(source))

        assert result.exit_code == 0
        assert f"{source} restored" in result.output
        assert source.read_text() == "x"

    def test_undo_into_deleted_directory(self, work_dir: Path, trash_dir: Path) -> None:
        folder = work_dir / "folder"
        folder.mkdir()
        (folder / "a.txt").write_text("x")
        _invoke(trash_dir, "trash", str(folder / "a.txt"))
        folder.rmdir()

        result = _invoke(trash_dir, "undo", str(folder / "a.txt"))

        assert result.exit_code == 0
        assert (folder / "a.txt").exists()

    def test_undo_unknown(self, work_dir: Path, trash_dir: Path) -> None:
        result = _invoke(trash_dir, "undo", str(work_dir / "never"))

        assert result.exit_code == 1
        assert "is not in the trash" in result.output

    def test_undo_blocked_by_new_file(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("old")
        _invoke(trash_dir, "trash", str(source))
        source.write_text("new")

        result = _invoke(trash_dir, "undo", str(source))

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert source.read_text() == "new"
        assert Ledger.load(trash_dir / ".trash.json").originals() == [str(source)]

    def test_partial_failure_summary(self, work_dir: Path, trash_dir: Path) -> None:
        source = work_dir / "a.txt"
        source.write_text("x")
        _invoke(trash_dir, "trash", str(source))

        result = _invoke(trash_dir, "undo", str(source), str(work_dir / "never"))

        assert result.exit_code == 1
        assert "1 restored, 1 failed" in result.output
        assert source.exists()
