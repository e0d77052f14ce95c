"""Адаптер Docker через docker-py с безопасной инициализацией."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from container_meta.engine.exceptions import EngineError
from container_meta.engine.models import ContainerSummary
from container_meta.utils.helpers import normalize_socket_path, strip_label_prefix

LOGGER = logging.getLogger(__name__)

DEFAULT_API_TIMEOUT = 60


class DockerSDKEngine:
    """Управляет созданием docker API client и выполняет запросы через него."""

    def __init__(
        self,
        *,
        docker_host: str = "",
        timeout_seconds: int = 0,
        raw_client: Any | None = None,
    ) -> None:
        self.docker_host = normalize_socket_path(docker_host)
        self.timeout_seconds = timeout_seconds
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        timeout = self.timeout_seconds or DEFAULT_API_TIMEOUT
        try:
            if self.docker_host:
                return docker.DockerClient(base_url=self.docker_host, timeout=timeout)
            return docker.from_env(timeout=timeout)
        except DockerException as exc:
            LOGGER.error("Docker client init error via %s: %s", self.docker_host or "env", exc)
            raise EngineError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    def list_container_ids(self, label_filter: str) -> List[str]:
        return [summary.identifier for summary in self.list_containers(label_filter)]

    def list_containers(self, label_filter: str) -> List[ContainerSummary]:
        filters = {"label": strip_label_prefix(label_filter)}
        try:
            found = self._client.containers.list(all=True, filters=filters)
        except (DockerException, RequestException) as exc:
            raise EngineError(f"Cannot list containers: {exc}") from exc
        result = []
        for container in found:
            attrs = getattr(container, "attrs", {}) or {}
            result.append(
                ContainerSummary(
                    identifier=getattr(container, "short_id", None) or container.id,
                    image=_image_name(container, attrs),
                    status=str(getattr(container, "status", "") or attrs.get("Status", "")),
                )
            )
        return result

    def inspect(self, container_id: str, *, single_object: bool) -> str:
        try:
            attrs: Optional[dict] = self._client.api.inspect_container(container_id)
        except (DockerException, RequestException) as exc:
            raise EngineError(f"Cannot inspect {container_id}: {exc}") from exc
        # API всегда отдаёт один объект; штатный вывод CLI это массив из одного элемента
        if single_object:
            return json.dumps(attrs)
        return json.dumps([attrs] if attrs is not None else [])


def _image_name(container: Any, attrs: dict) -> str:
    """Имя образа как в `docker ps`; верхнеуровневый Image в attrs это sha256-id."""

    config = attrs.get("Config") or {}
    name = config.get("Image")
    if name:
        return str(name)
    try:
        tags = getattr(container.image, "tags", None) or []
    except (DockerException, RequestException) as exc:
        LOGGER.debug("Cannot resolve image tags for %s: %s", container.id, exc)
        tags = []
    if tags:
        return str(tags[0])
    return str(attrs.get("Image", ""))
