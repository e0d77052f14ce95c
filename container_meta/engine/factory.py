"""Выбор адаптера Docker по настройкам."""

from __future__ import annotations

import logging
from typing import Any

from container_meta.engine.base import ContainerEngine
from container_meta.engine.cli import DockerCLIEngine
from container_meta.engine.exceptions import EngineError
from container_meta.engine.sdk import DockerSDKEngine

LOGGER = logging.getLogger(__name__)


def create_engine(settings: Any) -> ContainerEngine:
    """Создаёт CLI- или SDK-адаптер в зависимости от engine.backend."""

    backend = settings.get_value("engine", "backend", default="cli")
    docker_host = settings.get_value("engine", "docker_host", default="")
    timeout = int(settings.get_value("engine", "command_timeout_sec", default=0))
    LOGGER.debug("Using %s engine backend", backend)

    if backend == "cli":
        return DockerCLIEngine(
            docker_binary=settings.get_value("engine", "docker_binary", default="docker"),
            docker_host=docker_host,
            timeout_seconds=timeout,
        )
    if backend == "sdk":
        return DockerSDKEngine(docker_host=docker_host, timeout_seconds=timeout)
    raise EngineError(f"Unknown engine backend: {backend}")
