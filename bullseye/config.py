"""
Preset loader - YAML configuration loading with Pydantic validation.

Variant presets live in ``bullseye/presets/<name>.yaml``. A preset can be
requested by name or by path, and adjusted with nested overrides before
validation.

Examples:
    >>> config = load_config("slide")
    >>> config.bow.control.value
    'slide'
    >>> sorted(list_presets())
    ['aim', 'slide']
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from models import ArcheryConfig
from bullseye.logging import get_logger

log = get_logger('config')

PRESETS_DIR = Path(__file__).parent / 'presets'


def list_presets(presets_dir: Optional[Path] = None) -> List[str]:
    """Names of the available presets (YAML file stems)."""
    directory = Path(presets_dir) if presets_dir else PRESETS_DIR
    if not directory.exists():
        return []
    return sorted(p.stem for p in directory.glob('*.yaml'))


def _resolve(name_or_path: Union[str, Path], presets_dir: Optional[Path]) -> Path:
    candidate = Path(name_or_path)
    if candidate.suffix in ('.yaml', '.yml'):
        return candidate
    directory = Path(presets_dir) if presets_dir else PRESETS_DIR
    return directory / f"{name_or_path}.yaml"


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def parse_config(data: Dict[str, Any], source: str = "<dict>") -> ArcheryConfig:
    """Validate a config dict.

    Raises:
        ValueError: If the data does not describe a valid configuration
    """
    try:
        return ArcheryConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid archery configuration in '{source}':\n{e}") from e


def load_config(
    name_or_path: Union[str, Path] = "slide",
    overrides: Optional[Dict[str, Any]] = None,
    presets_dir: Optional[Path] = None,
) -> ArcheryConfig:
    """Load and validate a preset.

    Args:
        name_or_path: Preset name ('slide', 'aim') or path to a YAML file
        overrides: Nested values merged over the file before validation
        presets_dir: Directory to look up preset names in

    Raises:
        FileNotFoundError: If the preset file does not exist
        ValueError: If the YAML is malformed or fails validation
    """
    path = _resolve(name_or_path, presets_dir)
    if not path.exists():
        available = ', '.join(list_presets(presets_dir)) or 'none'
        raise FileNotFoundError(
            f"Archery preset '{name_or_path}' not found. "
            f"Expected file: {path} (available: {available})"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Preset '{path}' must contain a mapping, got {type(data).__name__}")

    if overrides:
        data = _merge(data, overrides)

    config = parse_config(data, source=str(path))
    log.debug("loaded preset %s from %s", config.name, path)
    return config


def with_play_area(config: ArcheryConfig, width: int, height: int) -> ArcheryConfig:
    """Return a copy of ``config`` re-validated for a different play area."""
    data = config.model_dump(mode='json')
    data['play_area'] = {'width': width, 'height': height}
    return parse_config(data, source=f"{config.name}@{width}x{height}")
