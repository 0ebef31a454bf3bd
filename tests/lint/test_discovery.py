"""Tests for lint/discovery.py."""

from __future__ import annotations

from pathlib import Path

from inlinetypes.config.models import ScanConfig
from inlinetypes.lint.discovery import discover_files, is_declaration_file


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestDiscoverFiles:
    """Directory walking and filtering."""

    def test_collects_typescript_extensions(self, tmp_path: Path) -> None:
        # Given
        for name in ("a.ts", "b.tsx", "c.mts", "d.cts", "e.js", "f.py"):
            _touch(tmp_path / name)

        # When
        files = discover_files([tmp_path], ScanConfig())

        # Then
        assert [f.name for f in files] == ["a.ts", "b.tsx", "c.mts", "d.cts"]

    def test_skips_declaration_files(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a.ts")
        _touch(tmp_path / "types.d.ts")

        assert [f.name for f in discover_files([tmp_path], ScanConfig())] == ["a.ts"]

    def test_includes_declaration_files_when_configured(self, tmp_path: Path) -> None:
        _touch(tmp_path / "types.d.ts")

        files = discover_files([tmp_path], ScanConfig(include_declaration_files=True))

        assert [f.name for f in files] == ["types.d.ts"]

    def test_prunes_dependency_and_vcs_dirs(self, tmp_path: Path) -> None:
        _touch(tmp_path / "src" / "a.ts")
        _touch(tmp_path / "node_modules" / "lib" / "b.ts")
        _touch(tmp_path / ".git" / "c.ts")
        _touch(tmp_path / "dist" / "d.ts")

        files = discover_files([tmp_path], ScanConfig())

        assert files == [tmp_path / "src" / "a.ts"]

    def test_exclude_globs(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a.ts")
        _touch(tmp_path / "a.test.ts")
        _touch(tmp_path / "generated" / "b.ts")

        files = discover_files([tmp_path], ScanConfig(exclude=["*.test.ts", "generated"]))

        assert files == [tmp_path / "a.ts"]

    def test_explicit_file_bypasses_excludes(self, tmp_path: Path) -> None:
        target = _touch(tmp_path / "a.test.ts")

        assert discover_files([target], ScanConfig(exclude=["*.test.ts"])) == [target]

    def test_skips_large_files(self, tmp_path: Path) -> None:
        _touch(tmp_path / "big.ts", "x" * 2048)
        _touch(tmp_path / "small.ts", "x")

        files = discover_files([tmp_path], ScanConfig(max_file_size_kb=1))

        assert [f.name for f in files] == ["small.ts"]

    def test_missing_path_ignored(self, tmp_path: Path) -> None:
        assert discover_files([tmp_path / "missing"], ScanConfig()) == []

    def test_deduplicates(self, tmp_path: Path) -> None:
        target = _touch(tmp_path / "a.ts")

        assert discover_files([tmp_path, target], ScanConfig()) == [target]


class TestIsDeclarationFile:
    def test_variants(self) -> None:
        assert is_declaration_file(Path("a.d.ts"))
        assert is_declaration_file(Path("a.d.mts"))
        assert not is_declaration_file(Path("a.ts"))
