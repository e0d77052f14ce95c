"""Результат получения метаданных контейнера."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class ContainerMetadata:
    """Нормализованная запись контейнера и извлечённые из неё поля."""

    container_id: str
    image: str
    record: Dict[str, Any]
    env: List[str] = field(default_factory=list)
    source: str = "formatted"  # formatted или raw
