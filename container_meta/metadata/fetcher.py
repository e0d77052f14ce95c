"""Поиск контейнера по метке и получение его метаданных.

Класс ``ContainerMetadataFetcher`` связывает адаптер Docker с функциями
нормализации и извлечения полей: найти первый контейнер с меткой,
получить его запись одним объектом, извлечь образ и переменные окружения.
"""

from __future__ import annotations

import logging
from typing import List

from container_meta.engine.base import ContainerEngine
from container_meta.engine.exceptions import EngineError
from container_meta.engine.models import ContainerSummary
from container_meta.metadata.errors import ContainerNotFoundError
from container_meta.metadata.fields import extract_env, extract_image
from container_meta.metadata.inspector import safe_inspect
from container_meta.metadata.models import ContainerMetadata

LOGGER = logging.getLogger(__name__)


class ContainerMetadataFetcher:
    """Высокоуровневый API поверх ContainerEngine."""

    def __init__(self, engine: ContainerEngine) -> None:
        self._engine = engine

    def locate_container(self, label_filter: str) -> str:
        """Возвращает id первого контейнера с меткой или поднимает ContainerNotFoundError."""

        ids = self._engine.list_container_ids(label_filter)
        if ids:
            container_id = ids[0]
            if len(ids) > 1:
                LOGGER.info(
                    "%d containers match label %s, using the first one", len(ids), label_filter
                )
            LOGGER.info("Found container id: %s", container_id)
            return container_id

        LOGGER.warning(
            "No container id found with the expected filter. "
            "Listing matching containers for debugging:"
        )
        for summary in self.list_candidates(label_filter):
            LOGGER.warning("  %s", summary.describe())
        raise ContainerNotFoundError(label_filter)

    def list_candidates(self, label_filter: str) -> List[ContainerSummary]:
        """Список контейнеров с меткой для диагностики; сбой листинга не фатален."""

        try:
            return self._engine.list_containers(label_filter)
        except EngineError as exc:
            LOGGER.warning("Cannot list containers for label %s: %s", label_filter, exc)
            return []

    def fetch(self, label_filter: str) -> ContainerMetadata:
        """Находит контейнер и возвращает его образ, окружение и полную запись."""

        container_id = self.locate_container(label_filter)
        outcome = safe_inspect(self._engine, container_id)
        image = extract_image(outcome.record)
        LOGGER.info("Container image is: %s", image)
        env = extract_env(outcome.record)
        return ContainerMetadata(
            container_id=container_id,
            image=image,
            record=outcome.record,
            env=env,
            source=outcome.source,
        )
