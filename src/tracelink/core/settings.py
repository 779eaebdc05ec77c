"""
Runtime settings loaded from ``.tracelink/config.yaml``.

Budgets are fixed in ``tracelink.config``; this file only controls where
links point and whether the CLI opens them.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..config import DEFAULT_SETTINGS_PATH

logger = logging.getLogger(__name__)

ENV_URL_PREFIX = "TRACELINK_URL_PREFIX"
ENV_NO_BROWSER = "TRACELINK_NO_BROWSER"


class SearchSettings(BaseModel):
    prefix: str = ""
    context: Dict[str, Any] = Field(default_factory=dict)


class BrowserSettings(BaseModel):
    open: bool = True


class Settings(BaseModel):
    """Settings for building and opening trace links."""
    search: SearchSettings = Field(default_factory=SearchSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """
        Load settings from YAML, falling back to defaults.

        A missing or unreadable file yields the defaults; environment
        variables are applied on top either way.
        """
        config_path = Path(path or DEFAULT_SETTINGS_PATH)
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to read settings from {config_path}: {e}")
                data = {}

        try:
            settings = cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid settings in {config_path}: {e}")
            settings = cls()

        return settings._apply_env()

    def _apply_env(self) -> "Settings":
        prefix = os.getenv(ENV_URL_PREFIX)
        if prefix is not None:
            self.search.prefix = prefix
        if os.getenv(ENV_NO_BROWSER, "") not in ("", "0"):
            self.browser.open = False
        return self
