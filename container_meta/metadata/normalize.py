"""Приведение вывода docker inspect к одному JSON-объекту."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from container_meta.metadata.errors import InspectEmptyError

LOGGER = logging.getLogger(__name__)


def is_empty_output(text: str) -> bool:
    """Пустой вывод или литерал null считаются отсутствием результата."""

    stripped = text.strip()
    return not stripped or stripped == "null"


def normalize_record(text: str, *, container_id: str, source: str) -> Dict[str, Any]:
    """Разбирает JSON и возвращает ровно один объект.

    Массив сворачивается до первого элемента. Пустой вывод, ``null``,
    пустой массив, невалидный JSON и скаляры дают ``InspectEmptyError``.
    """

    if is_empty_output(text):
        raise InspectEmptyError(container_id, "empty or null output", source=source)

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InspectEmptyError(container_id, f"invalid JSON: {exc.msg}", source=source) from exc

    if isinstance(data, list):
        LOGGER.info(
            "docker inspect (%s) returned an array of %d element(s), using the first one",
            source,
            len(data),
        )
        if len(data) > 1:
            LOGGER.warning("Ignoring %d extra element(s) for: %s", len(data) - 1, container_id)
        if not data:
            raise InspectEmptyError(container_id, "empty array", source=source)
        data = data[0]

    if data is None:
        raise InspectEmptyError(container_id, "null record", source=source)
    if not isinstance(data, dict):
        raise InspectEmptyError(
            container_id, f"expected an object, got {type(data).__name__}", source=source
        )
    return data
