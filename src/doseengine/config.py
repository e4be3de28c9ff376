"""Calculator configuration.

Loaded from a JSON file so a site can adjust the weight caution range,
the export folder, or the medication presets without touching code.

Lookup order: explicit path, then $PEDIDOSE_CONFIG, then ./pedidose.json.
Anything missing falls back to the defaults below.

Example pedidose.json:
    {
      "caution_low_kg": 3,
      "caution_high_kg": 120,
      "export_dir": "exports",
      "presets": [
        {"name": "Acetaminophen", "strength_mg": 160, "volume_ml": 5, "dose_rate_mg_per_kg": 15},
        {"name": "Ibuprofen", "strength_mg": 100, "volume_ml": 5, "dose_rate_mg_per_kg": 10}
      ]
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .dosing import LB_PER_KG
from .presets import BUILTIN_PRESETS, make_profile
from .types import MedicationProfile

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PEDIDOSE_CONFIG"
DEFAULT_CONFIG_FILE = "pedidose.json"


@dataclass
class DoseConfig:
    """Session-wide settings."""
    # Weights outside this range get a caution, not a rejection
    caution_low_kg: float = 5.0
    caution_high_kg: float = 99.0
    lb_per_kg: float = LB_PER_KG
    export_dir: str = "."
    presets: tuple[MedicationProfile, ...] = field(default_factory=lambda: BUILTIN_PRESETS)


def find_config(path: Optional[str] = None) -> Optional[str]:
    """Resolve which config file to read, or None if there is none."""
    if path:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    if os.path.isfile(DEFAULT_CONFIG_FILE):
        return DEFAULT_CONFIG_FILE
    return None


def load_config(path: Optional[str] = None) -> DoseConfig:
    """Load configuration, returning defaults when no usable file exists."""
    path = find_config(path)
    if path is None:
        return DoseConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring config %s: %s", path, e)
        return DoseConfig()

    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level must be an object", path)
        return DoseConfig()

    logger.info("loaded config from %s", path)
    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> DoseConfig:
    config = DoseConfig()
    for key in ("caution_low_kg", "caution_high_kg", "lb_per_kg"):
        if key in data:
            try:
                setattr(config, key, float(data[key]))
            except (TypeError, ValueError):
                logger.warning("ignoring %s=%r: not a number", key, data[key])
    if "export_dir" in data:
        config.export_dir = str(data["export_dir"])
    if "presets" in data and not isinstance(data["presets"], list):
        logger.warning("ignoring presets=%r: must be a list", data["presets"])
    elif data.get("presets"):
        presets = []
        for item in data["presets"]:
            try:
                presets.append(make_profile(
                    item["name"], float(item["strength_mg"]),
                    float(item["volume_ml"]), float(item["dose_rate_mg_per_kg"]),
                ))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("skipping preset %r: %s", item, e)
        if presets:
            config.presets = tuple(presets)
    return config
