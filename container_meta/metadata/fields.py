"""Извлечение полей из записи контейнера."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping

from container_meta.metadata.errors import MissingFieldError

LOGGER = logging.getLogger(__name__)

IMAGE_FIELD = "Config.Image"
ENV_FIELD = "Config.Env"


def get_path(record: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Достаёт значение по пути вида ``Config.Image``; null и отсутствие дают default."""

    current: Any = record
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return default
        current = current.get(part)
        if current is None:
            return default
    return current


def extract_image(record: Mapping[str, Any]) -> str:
    """Возвращает Config.Image или поднимает MissingFieldError."""

    image = get_path(record, IMAGE_FIELD)
    if not isinstance(image, str) or not image:
        LOGGER.error("Full container JSON:\n%s", json.dumps(record, indent=2, sort_keys=True))
        raise MissingFieldError(IMAGE_FIELD)
    return image


def extract_env(record: Mapping[str, Any]) -> List[str]:
    """Возвращает Config.Env (пустой список, если поля нет) и логирует количество."""

    raw = get_path(record, ENV_FIELD, default=[])
    if isinstance(raw, list):
        env = [str(item) for item in raw]
    else:
        LOGGER.warning("%s is not a list (%s), ignoring it", ENV_FIELD, type(raw).__name__)
        env = []
    LOGGER.info("Env count: %d", len(env))
    return env


def env_as_mapping(env: List[str]) -> Dict[str, str]:
    """Разбивает KEY=VALUE; записи без '=' получают пустое значение."""

    result: Dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result
