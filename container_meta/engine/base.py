"""Общий контракт адаптеров Docker."""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from container_meta.engine.models import ContainerSummary


@runtime_checkable
class ContainerEngine(Protocol):
    """Минимальный набор операций, нужный для поиска и inspect контейнера."""

    def list_container_ids(self, label_filter: str) -> List[str]:
        """Возвращает id всех контейнеров (включая остановленные) с меткой."""

    def list_containers(self, label_filter: str) -> List[ContainerSummary]:
        """Возвращает id/image/status контейнеров с меткой."""

    def inspect(self, container_id: str, *, single_object: bool) -> str:
        """Возвращает JSON-текст docker inspect.

        При ``single_object=True`` запрашивается рендеринг одного объекта
        (``--format '{{json .}}'``), иначе штатный вывод (массив).
        Любой сбой вызова поднимает ``EngineError``.
        """
