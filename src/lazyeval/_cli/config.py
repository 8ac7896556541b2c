"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_RUNS = 2
DEFAULT_CHAIN_DEPTH = 100_000


class ConfigError(Exception):
    """Error in lazyeval configuration."""


@dataclass(slots=True, frozen=True)
class LazyevalConfig:
    """Configuration loaded from the [tool.lazyeval] table of pyproject.toml.

    Attributes:
        runs: How many times each strategy scenario is triggered.
        chain_depth: Number of links in the chain built by the `chain` command.
        project_root: Directory containing the pyproject.toml, if one was found.

    """

    runs: int = DEFAULT_RUNS
    chain_depth: int = DEFAULT_CHAIN_DEPTH
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_positive_int(section: dict[str, Any], key: str, default: int) -> int:
    if key not in section:
        return default

    value = section[key]
    # bool is a subclass of int but `runs = true` is never intended
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid [tool.lazyeval].{key}: expected integer, got {type(value).__name__}"
        raise ConfigError(msg)
    if value < 1:
        msg = f"Invalid [tool.lazyeval].{key}: expected positive integer, got {value}"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> LazyevalConfig:
    """Load and validate [tool.lazyeval] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed LazyevalConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("lazyeval", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.lazyeval] configuration. Expected a table."
        raise ConfigError(msg)

    return LazyevalConfig(
        runs=_parse_positive_int(section, "runs", DEFAULT_RUNS),
        chain_depth=_parse_positive_int(section, "chain_depth", DEFAULT_CHAIN_DEPTH),
        project_root=project_root,
    )


def get_config() -> LazyevalConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        LazyevalConfig (defaults if no pyproject.toml or no [tool.lazyeval] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return LazyevalConfig()
    return load_config(pyproject_path)
