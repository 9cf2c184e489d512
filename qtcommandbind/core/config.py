from typing import Any
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import ObserverEvent


class GeneralSettings(BaseModel):
    debug_mode: bool = False
    log_dir: str = ""


class BindingSettings(BaseModel):
    # Views follow command.can_execute() through their enabled flag
    sync_enabled_state: bool = False


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    binding: BindingSettings = Field(default_factory=BindingSettings)


class ConfigManager:
    """
    Manages binding configuration with JSON persistence and change events.
    """
    def __init__(self, filepath: str = "qtcommandbind.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = ObserverEvent("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # Re-validate the whole section so bad values never reach the model
        updated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, updated)
        self.save()
        self.on_changed.emit(section, key, getattr(updated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from the JSON file if present; otherwise write defaults."""
        if os.path.isfile(self.filepath):
            try:
                with open(self.filepath, "r", encoding="utf-8") as f:
                    raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self.save()
        else:
            self.save()

    def save(self):
        """Persist current config to the JSON file."""
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
