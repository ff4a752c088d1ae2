"""
Configuration file support for sexptree.

Provides hierarchical configuration loading from:
1. Project config: .sexptree.toml or sexptree.toml in project root
2. User config: ~/.config/sexptree/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sexptree.builder import DEFAULT_MAX_DEPTH

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Config file names to search for in project directories
CONFIG_FILENAMES = [".sexptree.toml", "sexptree.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "sexptree" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"verbose"},
    "parser": {"strict", "max_depth"},
    "output": {"format"},
}

OUTPUT_FORMATS = ("tree", "json", "repr")


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    verbose: bool = False


@dataclass
class ParserConfig:
    """Tree builder options."""

    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class OutputConfig:
    """How the CLI renders parsed trees."""

    format: str = "tree"


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            _merge_config(config, _load_toml_file(USER_CONFIG_PATH), str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            _merge_config(config, _load_toml_file(project_config), str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


class ConfigError(Exception):
    """Configuration-related errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Raises:
        ConfigError: If the file is unreadable or the TOML is invalid
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info

    Raises:
        ConfigError: If a known key has a value of the wrong type
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section, keys in KNOWN_KEYS.items():
        if section not in data:
            continue
        section_data = data[section]
        if not isinstance(section_data, dict):
            raise ConfigError(f"Config section '{section}' in {source} must be a table")
        _warn_unknown_keys(section_data, keys, section, source)

        target = getattr(config, section)
        for key in sorted(keys):
            if key in section_data:
                value = section_data[key]
                _check_value(section, key, value, getattr(target, key), source)
                setattr(target, key, value)
                sources[f"{section}.{key}"] = source


def _check_value(section: str, key: str, value: Any, default: Any, source: str) -> None:
    """Validate a config value against the type of its default."""
    name = f"{section}.{key}"
    # bool is a subclass of int, so compare exact types
    if type(value) is not type(default):
        raise ConfigError(
            f"Config key '{name}' in {source} must be {type(default).__name__}, "
            f"got {type(value).__name__}"
        )
    if name == "parser.max_depth" and value < 0:
        raise ConfigError(f"Config key '{name}' in {source} must be >= 0, got {value}")
    if name == "output.format" and value not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Config key '{name}' in {source} must be one of {', '.join(OUTPUT_FORMATS)}"
        )


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return f"""# sexptree configuration file
# Place as .sexptree.toml in project root or ~/.config/sexptree/config.toml for user defaults

[defaults]
# Enable debug logging by default
# verbose = false

[parser]
# Raise errors on malformed input instead of stopping silently
# strict = false

# Maximum parenthesis nesting depth (0 = unlimited)
# max_depth = {DEFAULT_MAX_DEPTH}

[output]
# Tree output format: tree, json, repr
# format = "tree"
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
