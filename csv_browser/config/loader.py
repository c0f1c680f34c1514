from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from csv_browser.config.model import CanvasConfig, GlobalConfig
from csv_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from `root/global.json`.

    Expected structure (every key optional):

        {
            "ui_title": "CSV Chart Browser",
            "subtitle": "...",
            "preview_rows": 10,
            "max_upload_bytes": 50000000,
            "canvas": {"width": 600, "height": 400,
                       "margin": {"top": 40, "right": 30, "bottom": 50, "left": 60}}
        }

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance; defaults when the file does not exist.
    :raises ConfigError: if the file is not valid JSON or holds invalid values.
    """
    root = Path(root)
    global_path = root / "global.json"
    logger.info("Loading global config", extra={"config_root": str(root)})

    if not global_path.is_file():
        logger.warning("No global.json found, using defaults", extra={"path": str(global_path)})
        return GlobalConfig()

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return _global_config_from_raw(raw, global_path)


def _global_config_from_raw(raw: Dict[str, Any], source: Path) -> GlobalConfig:
    defaults = GlobalConfig()
    try:
        canvas = CanvasConfig.from_dict(raw.get("canvas", {}))
        cfg = GlobalConfig(
            ui_title=str(raw.get("ui_title", defaults.ui_title)),
            subtitle=str(raw.get("subtitle", defaults.subtitle)),
            preview_rows=int(raw.get("preview_rows", defaults.preview_rows)),
            max_upload_bytes=int(raw.get("max_upload_bytes", defaults.max_upload_bytes)),
            canvas=canvas,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {source}: {e}") from e

    if cfg.preview_rows < 1:
        raise ConfigError(f"preview_rows must be >= 1 in {source}")
    if cfg.max_upload_bytes < 1:
        raise ConfigError(f"max_upload_bytes must be >= 1 in {source}")

    m = canvas.margin
    if canvas.width <= m.left + m.right or canvas.height <= m.top + m.bottom:
        raise ConfigError(f"canvas is smaller than its margins in {source}")

    return cfg
