from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from csv_browser.config.model import GlobalConfig
from csv_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, global config and the view
    registry. Passed into layout + callback registration functions instead of
    module-level globals. Uploaded data never lives here; it stays in the
    browser-side dataset store.
    """
    config_root: Path
    global_config: GlobalConfig
    registry: Optional[ViewRegistry] = None

    @property
    def canvas(self):
        return self.global_config.canvas

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if not self.registry.all_classes():
            raise RuntimeError("AppConfig.registry has no chart views registered.")
