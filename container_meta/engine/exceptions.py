"""Исключения слоя доступа к Docker."""

from __future__ import annotations

from typing import Optional, Sequence


class EngineError(Exception):
    """Ошибка обращения к Docker (CLI или SDK)."""

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
