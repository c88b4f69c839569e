"""YAML configuration for cbake projects.

Each project may carry a ``cbake.yaml`` next to its CMakeLists.txt. The file
is optional; missing keys fall back to the defaults below.

    build:
      build_dir: build
      cpp_standard: 11
      default_build_type: Debug
    include_dirs:
      - include
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from cbake.core.exceptions import ConfigurationError
from cbake.core.filesystem import atomic_write

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "cbake.yaml"
DEFAULT_BUILD_DIR = "build"
DEFAULT_CPP_STANDARD = 11


@dataclass
class ProjectConfig:
    """Settings read from cbake.yaml."""

    build_dir: str = DEFAULT_BUILD_DIR
    cpp_standard: Optional[int] = DEFAULT_CPP_STANDARD
    default_build_type: Optional[str] = None
    include_dirs: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        build = {"build_dir": self.build_dir}
        if self.cpp_standard is not None:
            build["cpp_standard"] = self.cpp_standard
        if self.default_build_type is not None:
            build["default_build_type"] = self.default_build_type
        return {"build": build, "include_dirs": list(self.include_dirs)}


def config_path_for(project_root: Path, config_file: Optional[Path] = None) -> Path:
    if config_file is None:
        return project_root / CONFIG_FILE_NAME
    if config_file.is_absolute():
        return config_file
    return project_root / config_file


def load_project_config(
    project_root: Path, config_file: Optional[Path] = None
) -> ProjectConfig:
    """
    Load cbake.yaml for a project.

    Args:
        project_root: Project root directory
        config_file: Explicit config path (default: <root>/cbake.yaml)

    Returns:
        Parsed configuration, or defaults if the file doesn't exist

    Raises:
        ConfigurationError: If the file is not valid YAML or has invalid values
    """
    path = config_path_for(project_root, config_file)

    if not path.exists():
        logger.debug(f"Config file not found (optional): {path}")
        return ProjectConfig()

    logger.debug(f"Loading configuration from {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}")

    return _parse_config(data or {}, path)


def _parse_config(data: dict, path: Path) -> ProjectConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")

    build = data.get("build") or {}
    if not isinstance(build, dict):
        raise ConfigurationError(f"{path}: 'build' must be a mapping")

    build_dir = build.get("build_dir", DEFAULT_BUILD_DIR)
    if not isinstance(build_dir, str) or not build_dir:
        raise ConfigurationError(f"{path}: build.build_dir must be a non-empty string")

    cpp_standard = build.get("cpp_standard", DEFAULT_CPP_STANDARD)
    if cpp_standard is not None:
        # bool is an int subclass
        if isinstance(cpp_standard, bool) or not isinstance(cpp_standard, int):
            raise ConfigurationError(f"{path}: build.cpp_standard must be an integer")
        if cpp_standard <= 0:
            raise ConfigurationError(f"{path}: build.cpp_standard must be positive")

    build_type = build.get("default_build_type")
    if build_type is not None and not isinstance(build_type, str):
        raise ConfigurationError(f"{path}: build.default_build_type must be a string")

    include_dirs = data.get("include_dirs") or []
    if not isinstance(include_dirs, list) or not all(
        isinstance(d, str) for d in include_dirs
    ):
        raise ConfigurationError(f"{path}: include_dirs must be a list of strings")

    return ProjectConfig(
        build_dir=build_dir,
        cpp_standard=cpp_standard,
        default_build_type=build_type,
        include_dirs=include_dirs,
    )


def write_project_config(path: Path, config: ProjectConfig) -> None:
    """Write cbake.yaml atomically."""
    content = yaml.safe_dump(
        config.to_dict(), default_flow_style=False, sort_keys=False
    )
    atomic_write(path, content)
    logger.debug(f"Wrote configuration to {path}")
