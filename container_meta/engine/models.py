"""Упрощённые структуры данных для описания объектов Docker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(slots=True)
class ContainerSummary:
    """Минимальное представление контейнера."""

    identifier: str  # идентификатор контейнера из docker ps
    image: str = ""
    status: str = ""

    @classmethod
    def from_ps_row(cls, row: Dict[str, Any]) -> "ContainerSummary":
        """Строит модель из строки `docker ps --format '{{json .}}'`."""

        return cls(
            identifier=str(row.get("ID", "")),
            image=str(row.get("Image", "")),
            status=str(row.get("Status", "")),
        )

    def describe(self) -> str:
        return f"{self.identifier}\t{self.image}\t{self.status}"
