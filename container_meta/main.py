"""Точка входа container-meta: найти контейнер по метке и вывести его метаданные."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import click

from container_meta import __version__
from container_meta.engine import ContainerEngine, EngineError, create_engine
from container_meta.metadata import ContainerMetadata, ContainerMetadataFetcher, MetadataError
from container_meta.metadata.fields import env_as_mapping
from container_meta.settings.exceptions import SettingsError
from container_meta.settings.groups import BACKENDS, EMIT_MODES
from container_meta.settings.registry import SettingsRegistry
from container_meta.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)

CONFIG_ENV_VAR = "CONTAINER_META_CONFIG"
LABEL_ENV_VAR = "CONTAINER_META_LABEL"
EXIT_OK = 0
EXIT_FAILURE = 1


def initialize_settings(
    config_path: Optional[Path], overrides: Dict[str, Dict[str, Any]]
) -> SettingsRegistry:
    """Загружает config.json (если задан) и применяет опции командной строки."""

    registry = SettingsRegistry(config_path=config_path)
    if config_path is None:
        registry.reset_to_defaults()
    else:
        registry.load_from_disk(config_path)
    registry.apply_overrides(overrides)
    return registry


def setup_logging_from_settings(settings: SettingsRegistry) -> bool:
    """Настраивает логирование по группе logging; False, если каталог логов недоступен."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return True

    logging.disable(logging.NOTSET)
    log_dir = logging_settings.get("log_dir") or ""
    level_name = logging_settings.get("level", "INFO")
    try:
        configure_logging(
            log_dir=Path(log_dir).expanduser() if log_dir else None,
            level_name=level_name,
            max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
            backup_count=logging_settings.get("max_archived_files", 5),
        )
    except OSError as exc:
        configure_logging(level_name=level_name)
        LOGGER.error("Cannot use log directory %s: %s", log_dir, exc)
        return False
    return True


def emit_result(metadata: ContainerMetadata, mode: str) -> None:
    """Пишет выбранную часть результата в stdout."""

    if mode == "image":
        click.echo(metadata.image)
    elif mode == "json":
        click.echo(json.dumps(metadata.record, indent=2, sort_keys=True))
    elif mode == "env":
        click.echo(json.dumps(env_as_mapping(metadata.env), indent=2, sort_keys=True))


def run(settings: SettingsRegistry, engine: Optional[ContainerEngine] = None) -> int:
    """Выполняет поиск контейнера и возвращает код завершения процесса."""

    label_filter = settings.get_value("lookup", "label_filter")
    try:
        engine = engine or create_engine(settings)
        metadata = ContainerMetadataFetcher(engine).fetch(label_filter)
    except MetadataError as exc:
        LOGGER.debug("Exiting with code %d", exc.exit_code)
        return exc.exit_code
    except EngineError as exc:
        LOGGER.error("Docker engine error: %s", exc)
        return EXIT_FAILURE

    emit_result(metadata, settings.get_value("lookup", "emit"))
    return EXIT_OK


@click.command(name="container-meta")
@click.version_option(__version__, prog_name="container-meta")
@click.option(
    "--label",
    "label_filter",
    envvar=LABEL_ENV_VAR,
    help="Label selector (key or key=value) of the container to inspect.",
)
@click.option(
    "--config",
    "config_path",
    envvar=CONFIG_ENV_VAR,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to a JSON config file.",
)
@click.option("--backend", type=click.Choice(BACKENDS), help="Docker access backend.")
@click.option("--docker-host", help="Docker daemon address (DOCKER_HOST).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Diagnostic log level.",
)
@click.option("--emit", type=click.Choice(EMIT_MODES), help="What to print to stdout.")
@click.pass_context
def cli(
    ctx: click.Context,
    label_filter: Optional[str],
    config_path: Optional[Path],
    backend: Optional[str],
    docker_host: Optional[str],
    log_level: Optional[str],
    emit: Optional[str],
) -> None:
    """Find a container by label and report its image and environment."""

    configure_logging(level_name=log_level or "INFO")
    overrides: Dict[str, Dict[str, Any]] = {
        "lookup": {"label_filter": label_filter, "emit": emit},
        "engine": {"backend": backend, "docker_host": docker_host},
        "logging": {"level": log_level.upper() if log_level else None},
    }
    try:
        settings = initialize_settings(config_path, overrides)
    except SettingsError as exc:
        LOGGER.debug("Configuration rejected: %s", exc.message)
        ctx.exit(EXIT_FAILURE)
    if not setup_logging_from_settings(settings):
        ctx.exit(EXIT_FAILURE)
    ctx.exit(run(settings))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Запускает CLI без sys.exit внутри click, ошибки опций дают код 1."""

    try:
        result = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="container-meta",
            standalone_mode=False,
        )
    except click.ClickException as exc:
        # код 2 зарезервирован за пустым результатом inspect
        exc.show()
        return EXIT_FAILURE
    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_FAILURE
    return int(result or 0)


if __name__ == "__main__":
    sys.exit(main())
