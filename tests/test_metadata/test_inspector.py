"""Тесты safe_inspect: основной путь, запасной путь и ошибки."""

from __future__ import annotations

import json

import pytest

from container_meta.metadata.errors import InspectEmptyError, InvalidArgumentError
from container_meta.metadata.inspector import (
    SOURCE_FORMATTED,
    SOURCE_RAW,
    attempt_inspect,
    safe_inspect,
)


def test_primary_path_returns_object(fake_engine_cls, record_json) -> None:
    engine = fake_engine_cls(formatted=record_json())
    outcome = safe_inspect(engine, "abc123")
    assert outcome.source == SOURCE_FORMATTED
    assert outcome.record["Config"]["Image"] == "nginx:latest"
    assert engine.calls == [("inspect", "abc123", True)]


def test_primary_path_unwraps_array(fake_engine_cls, record_json) -> None:
    engine = fake_engine_cls(formatted="[" + record_json(image="redis:7") + "]")
    outcome = safe_inspect(engine, "abc123")
    assert outcome.record["Config"]["Image"] == "redis:7"


def test_primary_empty_does_not_fall_back(fake_engine_cls, record_json) -> None:
    engine = fake_engine_cls(formatted="null", raw="[" + record_json() + "]")
    with pytest.raises(InspectEmptyError) as excinfo:
        safe_inspect(engine, "abc123")
    assert excinfo.value.source == SOURCE_FORMATTED
    assert ("inspect", "abc123", False) not in engine.calls


def test_fallback_used_when_primary_fails(fake_engine_cls, record_json, caplog) -> None:
    caplog.set_level("WARNING")
    engine = fake_engine_cls(formatted_error="template error", raw="[" + record_json() + "]")
    outcome = safe_inspect(engine, "abc123")
    assert outcome.source == SOURCE_RAW
    assert outcome.record["Config"]["Image"] == "nginx:latest"
    assert engine.calls == [("inspect", "abc123", True), ("inspect", "abc123", False)]
    assert "trying docker inspect raw output" in caplog.text


def test_fallback_accepts_plain_object(fake_engine_cls, record_json) -> None:
    engine = fake_engine_cls(formatted_error="boom", raw=record_json())
    assert safe_inspect(engine, "abc123").record["Id"] == "abc123"


@pytest.mark.parametrize("raw", ["", "null", "[]"])
def test_fallback_empty_raises(fake_engine_cls, raw: str) -> None:
    engine = fake_engine_cls(formatted_error="boom", raw=raw)
    with pytest.raises(InspectEmptyError) as excinfo:
        safe_inspect(engine, "abc123")
    assert excinfo.value.source == SOURCE_RAW
    assert excinfo.value.exit_code == 2


def test_fallback_failure_raises_empty(fake_engine_cls) -> None:
    engine = fake_engine_cls(formatted_error="boom", raw_error="No such object: abc123")
    with pytest.raises(InspectEmptyError) as excinfo:
        safe_inspect(engine, "abc123")
    assert "No such object" in excinfo.value.reason


@pytest.mark.parametrize("container_id", ["", "   "])
def test_empty_id_rejected(fake_engine_cls, container_id: str) -> None:
    engine = fake_engine_cls()
    with pytest.raises(InvalidArgumentError):
        safe_inspect(engine, container_id)
    assert engine.calls == []


def test_attempt_inspect_tags_failure(fake_engine_cls) -> None:
    engine = fake_engine_cls(formatted_error="boom")
    attempt = attempt_inspect(engine, "abc123", single_object=True)
    assert not attempt.ok
    assert attempt.output is None
    assert attempt.error == "boom"


def test_attempt_inspect_tags_success(fake_engine_cls) -> None:
    engine = fake_engine_cls(raw=json.dumps([{}]))
    attempt = attempt_inspect(engine, "abc123", single_object=False)
    assert attempt.ok
    assert attempt.source == SOURCE_RAW
