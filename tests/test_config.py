"""Tests for the configuration module."""

from pathlib import Path

import pytest

from lazyeval._cli.config import (
    DEFAULT_CHAIN_DEPTH,
    DEFAULT_RUNS,
    ConfigError,
    LazyevalConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for load_config function."""

    def test_no_section_gives_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == LazyevalConfig(
            runs=DEFAULT_RUNS,
            chain_depth=DEFAULT_CHAIN_DEPTH,
            project_root=tmp_path,
        )

    def test_reads_values(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.lazyeval]
runs = 5
chain_depth = 2000
""",
        )

        config = load_config(pyproject)

        assert config.runs == 5
        assert config.chain_depth == 2000
        assert config.project_root == tmp_path

    def test_partial_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.lazyeval]\nruns = 3\n")

        config = load_config(pyproject)

        assert config.runs == 3
        assert config.chain_depth == DEFAULT_CHAIN_DEPTH

    @pytest.mark.parametrize(
        ("body", "match"),
        [
            ("runs = 0", "expected positive integer"),
            ("chain_depth = -4", "expected positive integer"),
            ('runs = "many"', "expected integer"),
            ("runs = true", "expected integer"),
            ("runs = 1.5", "expected integer"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, body: str, match: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.lazyeval]\n{body}\n")

        with pytest.raises(ConfigError, match=match):
            load_config(pyproject)

    def test_section_must_be_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\nlazyeval = "fast"\n')

        with pytest.raises(ConfigError, match="Expected a table"):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.lazyeval\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config function."""

    def test_uses_pyproject_of_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.lazyeval]\nchain_depth = 10\n")
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.chain_depth == 10
        assert config.project_root == tmp_path.resolve()
