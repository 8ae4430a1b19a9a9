"""
Configuration loader — finds leetgen.yaml and the project it anchors.

A leetgen project is the directory holding leetgen.yaml: generated
solutions, support libraries and the state file all live below it. With
no leetgen.yaml in the working directory or any parent, the working
directory is the project and the built-in defaults apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from leetgen.core.errors import LeetgenError
from leetgen.core.models.config import Config

logger = logging.getLogger(__name__)

CONFIG_FILE = "leetgen.yaml"


class ConfigError(LeetgenError):
    """Raised when leetgen.yaml is missing, unreadable or invalid."""


@dataclass(frozen=True)
class Project:
    """A loaded configuration and the directory it governs.

    Attributes:
        config:      Validated configuration (defaults without a file).
        root:        Absolute project root.
        config_file: The leetgen.yaml it came from, if any.
    """

    config: Config
    root: Path
    config_file: Path | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest leetgen.yaml in ``start_dir`` (default: cwd) or a parent."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> Config:
    """Parse and validate one leetgen.yaml. An empty file gives the defaults.

    Raises:
        ConfigError: The file is missing, unreadable, not YAML, not a
            mapping, or fails validation.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return Config.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def load_project(config_file: Path | None = None, cwd: Path | None = None) -> Project:
    """Load the project an explicit config file, or the nearest one, belongs to."""
    if config_file is None:
        config_file = find_config_file(cwd)

    if config_file is None:
        root = (cwd or Path.cwd()).resolve()
        logger.info("No %s above %s, using defaults", CONFIG_FILE, root)
        return Project(config=Config(), root=root)

    config_file = config_file.resolve()
    config = load_config(config_file)
    logger.info("Loaded %s (lang=%s)", config_file, config.code.lang)
    return Project(config=config, root=config_file.parent, config_file=config_file)
