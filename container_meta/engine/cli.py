"""Адаптер Docker через вызовы docker CLI."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from typing import Dict, List, Optional

from container_meta.engine.exceptions import EngineError
from container_meta.engine.models import ContainerSummary
from container_meta.utils.helpers import format_label_filter, normalize_socket_path

LOGGER = logging.getLogger(__name__)

SINGLE_OBJECT_FORMAT = "{{json .}}"


class DockerCLIEngine:
    """Выполняет docker ps / docker inspect и возвращает их вывод."""

    def __init__(
        self,
        *,
        docker_binary: str = "docker",
        docker_host: str = "",
        timeout_seconds: int = 0,
    ) -> None:
        self.docker_binary = docker_binary
        self.docker_host = normalize_socket_path(docker_host)
        self.timeout_seconds = timeout_seconds

    def list_container_ids(self, label_filter: str) -> List[str]:
        output = self._run(["ps", "-aq", "--filter", format_label_filter(label_filter)])
        return [line.strip() for line in output.splitlines() if line.strip()]

    def list_containers(self, label_filter: str) -> List[ContainerSummary]:
        output = self._run(
            [
                "ps",
                "-a",
                "--filter",
                format_label_filter(label_filter),
                "--format",
                SINGLE_OBJECT_FORMAT,
            ]
        )
        result: List[ContainerSummary] = []
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError:
                LOGGER.warning("Skipping unparseable docker ps line: %s", line)
                continue
            if isinstance(row, dict):
                result.append(ContainerSummary.from_ps_row(row))
        return result

    def inspect(self, container_id: str, *, single_object: bool) -> str:
        args = ["inspect"]
        if single_object:
            args.extend(["--format", SINGLE_OBJECT_FORMAT])
        args.append(container_id)
        return self._run(args)

    # ----------------------------------------------------------------- helpers
    def _build_environment(self) -> Dict[str, str]:
        """Формирует окружение для запуска docker-команд."""

        env = os.environ.copy()
        if self.docker_host:
            env["DOCKER_HOST"] = self.docker_host
        return env

    def _run(self, args: List[str]) -> str:
        command = [self.docker_binary, *args]
        timeout: Optional[int] = self.timeout_seconds if self.timeout_seconds > 0 else None
        LOGGER.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                env=self._build_environment(),
                timeout=timeout,
            )
        except FileNotFoundError as exc:
            raise EngineError(
                f"Docker binary not found: {self.docker_binary}", command=command
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise EngineError(
                f"Command timed out after {self.timeout_seconds} seconds", command=command
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            raise EngineError(
                f"Command exited with code {exc.returncode}: {stderr}",
                command=command,
                returncode=exc.returncode,
                stderr=stderr,
            ) from exc
        return result.stdout or ""
