"""Общие фикстуры тестов container-meta."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Dict, List, Optional

import pytest

from container_meta.engine.exceptions import EngineError
from container_meta.engine.models import ContainerSummary
from container_meta.settings.registry import SettingsRegistry


class FakeEngine:
    """Подменяет docker: заранее заданные ответы ps/inspect и журнал вызовов."""

    def __init__(
        self,
        ids: Optional[List[str]] = None,
        *,
        formatted: Optional[str] = None,
        raw: Optional[str] = None,
        formatted_error: Optional[str] = None,
        raw_error: Optional[str] = None,
        summaries: Optional[List[ContainerSummary]] = None,
    ) -> None:
        self.ids = ids or []
        self.formatted = formatted
        self.raw = raw
        self.formatted_error = formatted_error
        self.raw_error = raw_error
        self.summaries = summaries if summaries is not None else []
        self.calls: List[tuple] = []

    def list_container_ids(self, label_filter: str) -> List[str]:
        self.calls.append(("ids", label_filter))
        return list(self.ids)

    def list_containers(self, label_filter: str) -> List[ContainerSummary]:
        self.calls.append(("ps", label_filter))
        return list(self.summaries)

    def inspect(self, container_id: str, *, single_object: bool) -> str:
        self.calls.append(("inspect", container_id, single_object))
        if single_object:
            if self.formatted_error is not None:
                raise EngineError(self.formatted_error)
            return self.formatted if self.formatted is not None else ""
        if self.raw_error is not None:
            raise EngineError(self.raw_error)
        return self.raw if self.raw is not None else ""


def make_record(image: Optional[str] = "nginx:latest", env: Optional[List[str]] = None) -> Dict:
    config: Dict = {}
    if image is not None:
        config["Image"] = image
    if env is not None:
        config["Env"] = env
    return {"Id": "abc123", "Name": "/web", "Config": config}


@pytest.fixture
def fake_engine_cls():
    return FakeEngine


@pytest.fixture
def record_json():
    def _build(image: Optional[str] = "nginx:latest", env: Optional[List[str]] = None) -> str:
        return json.dumps(make_record(image, env))

    return _build


@pytest.fixture
def registry():
    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    registry = SettingsRegistry()
    registry.reset_to_defaults()
    yield registry
    SettingsRegistry._instance = None  # type: ignore[attr-defined]


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        # только обработчики configure_logging, обработчики pytest не трогаем
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
