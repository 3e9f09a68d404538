"""
Analysis settings loader: supports YAML files, dicts, AnalysisSettings instances, and defaults.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

from roadstat.analysis.degree import DEFAULT_DEGREE_THRESHOLD
from roadstat.analysis.neighborhood import DEFAULT_GAP_THRESHOLD

DEFAULT_START_NODE = 456
DEFAULT_CUTOFF = 3


@dataclass(frozen=True)
class AnalysisSettings:
    """Parameters of the fixed analysis battery."""

    degree_threshold: int = DEFAULT_DEGREE_THRESHOLD
    gap_threshold: int = DEFAULT_GAP_THRESHOLD
    start_node: int = DEFAULT_START_NODE
    cutoff: int = DEFAULT_CUTOFF
    start_by_label: bool = False
    parallel: bool = False


_INT_FIELDS = ("degree_threshold", "gap_threshold", "start_node", "cutoff")
_BOOL_FIELDS = ("start_by_label", "parallel")


def default_settings() -> AnalysisSettings:
    return AnalysisSettings()


def load_settings(
    source: AnalysisSettings | str | Path | dict | None,
) -> AnalysisSettings:
    """
    Load AnalysisSettings from various sources.

    Args:
        source: Can be:
            - AnalysisSettings instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys
            - None: returns default_settings()

    Returns:
        AnalysisSettings instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the YAML is invalid, or keys are unknown or have invalid values
    """
    if source is None:
        return default_settings()

    if isinstance(source, AnalysisSettings):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_settings: {type(source).__name__}"
    )


def _load_from_yaml_file(path: str | Path) -> AnalysisSettings:
    """Load AnalysisSettings from a YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Settings file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")

    # Either flat keys at root or nested under "analysis"
    if "analysis" in data:
        section = data["analysis"]
        if not isinstance(section, dict):
            raise ValueError(f"YAML file {file_path}: 'analysis' must be a dict")
        return _load_from_dict(section)
    return _load_from_dict(data)


def _load_from_dict(data: dict) -> AnalysisSettings:
    """
    Construct AnalysisSettings from a dict. Missing keys take defaults.

    Raises:
        ValueError: unknown keys, non-integer or negative numbers, non-boolean flags
    """
    known = {f.name for f in fields(AnalysisSettings)}
    unknown = sorted(set(data) - known, key=str)
    if unknown:
        raise ValueError(f"Unknown settings keys: {', '.join(map(str, unknown))}")

    values: dict = {}
    for name in _INT_FIELDS:
        if name not in data:
            continue
        value = data[name]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Setting '{name}' must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValueError(f"Setting '{name}' must be >= 0, got {value}")
        values[name] = value
    for name in _BOOL_FIELDS:
        if name not in data:
            continue
        value = data[name]
        if not isinstance(value, bool):
            raise ValueError(
                f"Setting '{name}' must be a boolean, got {type(value).__name__}"
            )
        values[name] = value

    return AnalysisSettings(**values)


def settings_to_dict(settings: AnalysisSettings) -> dict:
    return asdict(settings)
