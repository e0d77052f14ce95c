"""Ошибки получения метаданных контейнера и их коды завершения."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class MetadataError(Exception):
    """Базовое исключение с контекстом и кодом завершения процесса."""

    exit_code: int = 1

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, логируя ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class InvalidArgumentError(MetadataError):
    """Передан пустой идентификатор контейнера."""

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(
            f"Invalid argument '{argument}': {value!r}",
            context={"argument": argument, "value": value},
        )


class ContainerNotFoundError(MetadataError):
    """Ни один контейнер не подходит под label-фильтр."""

    def __init__(self, label_filter: str) -> None:
        self.label_filter = label_filter
        super().__init__(
            f"No container matches label filter '{label_filter}'",
            context={"label_filter": label_filter},
        )


class InspectEmptyError(MetadataError):
    """docker inspect не вернул ничего пригодного (пусто, null, не объект)."""

    exit_code = 2

    def __init__(self, container_id: str, reason: str, *, source: str) -> None:
        self.container_id = container_id
        self.reason = reason
        self.source = source
        super().__init__(
            f"Inspect of '{container_id}' returned nothing usable ({source}): {reason}",
            context={"container_id": container_id, "reason": reason, "source": source},
        )


class MissingFieldError(MetadataError):
    """Обязательное поле отсутствует в записи контейнера."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Required field '{field}' is missing or empty",
            context={"field": field},
        )
