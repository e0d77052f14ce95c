"""Реестр настроек container-meta (Singleton)."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from container_meta.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from container_meta.settings.groups import (
    EngineSettings,
    LoggingSettings,
    LookupSettings,
    SettingsGroup,
)
from container_meta.settings.schemas import DEFAULT_CONFIG


class SettingsRegistry:
    """Singleton-реестр, управляющий всеми группами настроек."""

    _instance: Optional["SettingsRegistry"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "SettingsRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            if config_path is not None:
                self._file_path = config_path
            return

        self._logger = logging.getLogger(__name__)
        self._file_path: Optional[Path] = config_path
        self._settings: Dict[str, SettingsGroup] = {}

        self._register_groups()
        self._initialized = True

    @property
    def config_path(self) -> Optional[Path]:
        """Путь к файлу конфигурации (None, если работаем на дефолтах)."""

        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        try:
            return settings_group.get(key)
        except SettingsNotFoundError:
            if default is not None:
                return default
            raise

    def set_value(self, group: str, key: str, value: Any) -> None:
        settings_group = self._require_group(group)
        old_value = settings_group.get(key)
        settings_group.set(key, value)
        if old_value != value:
            self._logger.debug("Setting overridden: %s.%s (%r -> %r)", group, key, old_value, value)

    def get_group(self, group: str) -> SettingsGroup:
        return self._require_group(group)

    def apply_overrides(self, overrides: Dict[str, Dict[str, Any]]) -> None:
        """Применяет значения поверх файла, пропуская None (опция не задана)."""

        for group, values in overrides.items():
            for key, value in values.items():
                if value is not None:
                    self.set_value(group, key, value)

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        if target is None:
            self._logger.debug("No config file given, using defaults.")
            self.reset_to_defaults()
            return
        if not target.exists():
            raise SettingsIOError(target, "file not found")
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")

        merged = self._merge_with_defaults(content)
        for name, group in self._settings.items():
            group_data = merged.get(name, {})
            if isinstance(group_data, dict):
                group.from_dict(group_data)
        self.validate()
        self._file_path = target
        self._logger.debug("Config loaded from %s", target)

    def validate(self) -> bool:
        for name, group in self._settings.items():
            for key in group.keys():
                value = group.get(key)
                is_valid, error = group.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(
                        key=f"{name}.{key}",
                        value=value,
                        reason=error,
                    )
        return True

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()

    def to_dict(self) -> Dict[str, Any]:
        """Текущие значения всех групп."""

        return {name: group.to_dict() for name, group in self._settings.items()}

    # ----------------------------------------------------------------- helpers
    def _register_groups(self) -> None:
        self._settings = {
            "lookup": LookupSettings(),
            "engine": EngineSettings(),
            "logging": LoggingSettings(),
        }

    def _require_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def _merge_with_defaults(self, incoming: Dict[str, Any]) -> Dict[str, Any]:
        base = copy.deepcopy(DEFAULT_CONFIG)
        for key, value in incoming.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key].update(value)
            else:
                base[key] = value
        return base
