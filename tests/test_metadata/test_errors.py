"""Тесты исключений получения метаданных."""

from __future__ import annotations

import pytest

from container_meta.metadata.errors import (
    ContainerNotFoundError,
    InspectEmptyError,
    InvalidArgumentError,
    MetadataError,
    MissingFieldError,
)


class TestExitCodes:
    """Коды завершения, которые видит вызывающий процесс."""

    def test_codes(self) -> None:
        assert InvalidArgumentError("container_id", "").exit_code == 1
        assert ContainerNotFoundError("4368e3").exit_code == 1
        assert MissingFieldError("Config.Image").exit_code == 1
        assert InspectEmptyError("abc", "empty", source="raw").exit_code == 2

    def test_all_derive_from_base(self) -> None:
        for error in (
            InvalidArgumentError("container_id", None),
            ContainerNotFoundError("x"),
            MissingFieldError("Config.Image"),
            InspectEmptyError("abc", "empty", source="formatted"),
        ):
            assert isinstance(error, MetadataError)


class TestLogging:
    """Ошибки логируются вместе с контекстом при создании."""

    def test_not_found_logs_filter(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = ContainerNotFoundError("com.example.role=web")
        assert str(error) == "No container matches label filter 'com.example.role=web'"
        assert "com.example.role=web" in caplog.text

    def test_inspect_empty_context(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = InspectEmptyError("abc123", "empty or null output", source="raw")
        assert error.context == {
            "container_id": "abc123",
            "reason": "empty or null output",
            "source": "raw",
        }
        assert "abc123" in caplog.text
