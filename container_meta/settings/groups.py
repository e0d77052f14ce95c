"""Классы групп настроек с полной поддержкой валидации."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from container_meta.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from container_meta.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

# key или key=value, без пробелов; допускается явный префикс label=
LABEL_FILTER_PATTERN = r"^(label=)?[^\s=]+(=\S*)?$"
EMIT_MODES = ("none", "image", "json", "env")
BACKENDS = ("cli", "sdk")


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        """Возвращает доступные ключи группы."""

        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        """Возвращает значение настройки."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        """Применяет соответствующий валидатор и возвращает результат."""

        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Возвращает копию всех значений."""

        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря (использует set для валидации)."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        """Сбрасывает значения группы к дефолтным."""

        self._values = dict(self._defaults)


class LookupSettings(SettingsGroup):
    """Какой контейнер искать и что выводить в stdout."""

    group_name = "lookup"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "label_filter": "4368e3",
            "emit": "none",
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "label_filter": CompositeValidator(
                [TypeValidator(str), RegexValidator(LABEL_FILTER_PATTERN)]
            ),
            "emit": EnumValidator(EMIT_MODES),
        }


class EngineSettings(SettingsGroup):
    """Параметры доступа к Docker."""

    group_name = "engine"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "backend": "cli",
            "docker_binary": "docker",
            "docker_host": "",
            "command_timeout_sec": 0,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "backend": EnumValidator(BACKENDS),
            "docker_binary": CompositeValidator([TypeValidator(str), RegexValidator(r"^\S+$")]),
            "docker_host": TypeValidator(str),
            "command_timeout_sec": CompositeValidator(
                [TypeValidator(int, allow_bool=False), RangeValidator(0, 600)]
            ),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "log_dir": "",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
            "log_dir": TypeValidator(str),
            "max_file_size_mb": RangeValidator(1, 1000),
            "max_archived_files": RangeValidator(1, 50),
        }
