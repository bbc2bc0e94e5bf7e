"""
Current business settings.

Stored values are merged over the defaults on every read, so a saved document
that predates a new field still yields a complete Configuration.
"""

import json
import logging
import os
from typing import Optional

from solarsmart.engine.calculator import validate_configuration
from solarsmart.models.calculation import Configuration
from solarsmart.models.settings import SettingsUpdate

logger = logging.getLogger(__name__)


class SettingsStore:
    """In-memory settings, optionally mirrored to a JSON file."""

    def __init__(self, path: Optional[str] = None):
        self._path = path
        self._stored: dict = {}
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                self._stored = json.load(f)

    def get(self) -> Configuration:
        defaults = Configuration().model_dump()
        known = {k: v for k, v in self._stored.items() if k in defaults}
        return Configuration(**{**defaults, **known})

    def update(self, changes: SettingsUpdate) -> Configuration:
        """
        Apply a partial update and return the new configuration.

        Raises InputValidationError (and stores nothing) if the merged
        configuration has a non-positive value.
        """
        merged = {**self.get().model_dump(), **changes.model_dump(exclude_none=True)}
        config = Configuration(**merged)
        validate_configuration(config)

        self._stored = config.model_dump()
        self._save()
        logger.info("Settings updated: %s", self._stored)
        return config

    def _save(self) -> None:
        if not self._path:
            return
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(self._stored, f, indent=2)
