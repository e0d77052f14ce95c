"""Адаптеры доступа к Docker."""

from container_meta.engine.base import ContainerEngine
from container_meta.engine.exceptions import EngineError
from container_meta.engine.factory import create_engine
from container_meta.engine.models import ContainerSummary

__all__ = ["ContainerEngine", "ContainerSummary", "EngineError", "create_engine"]
