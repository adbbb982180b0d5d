from pathlib import Path

import pytest

from medscan.runner.workspace import workspace


class TestWorkspace:
    def test_temporary_directory_removed_after_use(self) -> None:
        with workspace() as path:
            assert path.is_dir()
            (path / "a.txt").write_text("x")
        assert not path.exists()

    def test_created_inside_configured_directory(self, tmp_path: Path) -> None:
        parent = tmp_path / "nested" / "work"
        with workspace(parent) as path:
            assert path.parent == parent
            assert path.name.startswith("medscan-")
            assert path.is_dir()
        assert not path.exists()
        assert parent.is_dir()

    def test_existing_files_in_configured_directory_survive(self, tmp_path: Path) -> None:
        parent = tmp_path / "docs"
        parent.mkdir()
        note = parent / "note.txt"
        note.write_text("keep me")

        with workspace(parent) as path:
            (path / "note.txt.txt").write_text("extracted")

        assert note.read_text() == "keep me"
        assert list(parent.iterdir()) == [note]

    def test_removed_when_body_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with workspace(tmp_path) as path:
                raise RuntimeError("boom")
        assert not path.exists()

    def test_removed_on_keyboard_interrupt(self, tmp_path: Path) -> None:
        with pytest.raises(KeyboardInterrupt):
            with workspace(tmp_path) as path:
                raise KeyboardInterrupt
        assert not path.exists()

    def test_removed_on_system_exit(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            with workspace(tmp_path) as path:
                raise SystemExit(143)
        assert not path.exists()

    def test_reports_removal(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with workspace(tmp_path):
            pass
        assert "[INFO] Temporary files removed." in capsys.readouterr().out
