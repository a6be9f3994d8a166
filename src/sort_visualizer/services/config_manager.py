"""Preset Management Module.

Handles listing, loading, and saving of visualizer presets.
Enforces the strictly typed VisualizerConfig schema.
"""

import json
import logging
from pathlib import Path
from typing import List

from ..schemas import VisualizerConfig

logger = logging.getLogger(__name__)

PRESET_DIR = Path.cwd() / "presets"


def list_presets() -> List[str]:
    """List all available preset files in the presets directory.

    Returns:
        Sorted filenames (e.g., ['classroom.json', 'stress.json']).
    """
    if not PRESET_DIR.exists():
        return []
    return sorted(f.name for f in PRESET_DIR.glob("*.json"))


def load_preset(filename: str) -> VisualizerConfig:
    """Load and validate a preset from a JSON file.

    Args:
        filename: Name of the file (e.g. 'classroom.json').

    Returns:
        Validated VisualizerConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = PRESET_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Preset file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    config = VisualizerConfig(**data)
    logger.info(f"Loaded preset {filename}")
    return config


def save_preset(config: VisualizerConfig, filename: str) -> Path:
    """Save a preset to a JSON file.

    Args:
        config: The VisualizerConfig object to save.
        filename: Target filename; '.json' is appended if missing.

    Returns:
        Path of the written file.
    """
    if not filename.endswith(".json"):
        filename = f"{filename}.json"
    PRESET_DIR.mkdir(parents=True, exist_ok=True)
    file_path = PRESET_DIR / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))
    logger.info(f"Saved preset to {file_path}")
    return file_path
