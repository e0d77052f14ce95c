"""Безопасный docker inspect: основной вызов с форматированием и запасной без него."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from container_meta.engine.base import ContainerEngine
from container_meta.engine.exceptions import EngineError
from container_meta.metadata.errors import InspectEmptyError, InvalidArgumentError
from container_meta.metadata.normalize import normalize_record

LOGGER = logging.getLogger(__name__)

SOURCE_FORMATTED = "formatted"
SOURCE_RAW = "raw"


@dataclass(slots=True, frozen=True)
class InspectAttempt:
    """Результат одного вызова inspect: либо вывод, либо описание сбоя."""

    single_object: bool
    output: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def source(self) -> str:
        return SOURCE_FORMATTED if self.single_object else SOURCE_RAW


@dataclass(slots=True, frozen=True)
class InspectOutcome:
    """Нормализованная запись контейнера и путь, которым она получена."""

    record: Dict[str, Any]
    source: str


def attempt_inspect(
    engine: ContainerEngine, container_id: str, *, single_object: bool
) -> InspectAttempt:
    """Вызывает inspect и превращает EngineError в неуспешную попытку."""

    try:
        output = engine.inspect(container_id, single_object=single_object)
    except EngineError as exc:
        return InspectAttempt(single_object=single_object, error=str(exc))
    return InspectAttempt(single_object=single_object, output=output)


def safe_inspect(engine: ContainerEngine, container_id: str) -> InspectOutcome:
    """Возвращает запись контейнера как один объект.

    Запасной вызов без ``--format`` делается только при явном сбое основного.
    Пустой или ``null`` результат на любом пути даёт ``InspectEmptyError``.
    """

    if not isinstance(container_id, str) or not container_id.strip():
        raise InvalidArgumentError("container_id", container_id)
    container_id = container_id.strip()

    primary = attempt_inspect(engine, container_id, single_object=True)
    if primary.ok:
        return _outcome_from(primary, container_id)

    LOGGER.warning(
        "docker inspect --format failed for: %s (%s), trying docker inspect raw output",
        container_id,
        primary.error,
    )
    fallback = attempt_inspect(engine, container_id, single_object=False)
    if not fallback.ok:
        raise InspectEmptyError(container_id, fallback.error or "inspect failed", source=SOURCE_RAW)
    return _outcome_from(fallback, container_id)


def _outcome_from(attempt: InspectAttempt, container_id: str) -> InspectOutcome:
    record = normalize_record(attempt.output or "", container_id=container_id, source=attempt.source)
    return InspectOutcome(record=record, source=attempt.source)
