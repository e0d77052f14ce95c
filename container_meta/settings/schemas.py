"""Дефолтная схема конфигурации container-meta."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG служит шаблоном для config.json и значениями без файла
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "lookup": {
        "label_filter": "4368e3",
        "emit": "none",
    },
    "engine": {
        "backend": "cli",
        "docker_binary": "docker",
        "docker_host": "",
        "command_timeout_sec": 0,
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "log_dir": "",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
}
