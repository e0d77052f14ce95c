"""Получение и нормализация метаданных контейнера."""

from container_meta.metadata.errors import (
    ContainerNotFoundError,
    InspectEmptyError,
    InvalidArgumentError,
    MetadataError,
    MissingFieldError,
)
from container_meta.metadata.fetcher import ContainerMetadataFetcher
from container_meta.metadata.models import ContainerMetadata

__all__ = [
    "ContainerMetadata",
    "ContainerMetadataFetcher",
    "ContainerNotFoundError",
    "InspectEmptyError",
    "InvalidArgumentError",
    "MetadataError",
    "MissingFieldError",
]
