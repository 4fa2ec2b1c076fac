"""Readiness 체크 유틸 테스트."""

from __future__ import annotations

import asyncio

from destino_facil.core.config import get_settings
from destino_facil.core.readiness import collect_readiness_status
from tests.mocks.sample_dataset import write_sample_dataset


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.delenv("PEXELS_API_KEY", raising=False)
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def test_collect_readiness_status_ready_with_dataset(monkeypatch, tmp_path) -> None:
    write_sample_dataset(tmp_path)
    _set_required_env(monkeypatch, DATASET_DIR=str(tmp_path))

    result = asyncio.run(collect_readiness_status())

    assert result["status"] == "ready"
    assert result["checks"]["countries"]["status"] == "ok"
    assert result["checks"]["pexels"]["status"] == "skip"


def test_collect_readiness_status_not_ready_when_dataset_missing(monkeypatch, tmp_path) -> None:
    _set_required_env(monkeypatch, DATASET_DIR=str(tmp_path))

    result = asyncio.run(collect_readiness_status())

    assert result["status"] == "not_ready"
    assert result["checks"]["cities"]["status"] == "fail"


def test_collect_readiness_status_not_ready_when_dataset_malformed(monkeypatch, tmp_path) -> None:
    write_sample_dataset(tmp_path, countries={"not": "a list"})
    _set_required_env(monkeypatch, DATASET_DIR=str(tmp_path))

    result = asyncio.run(collect_readiness_status())

    assert result["status"] == "not_ready"
    assert result["checks"]["countries"]["status"] == "fail"
    assert result["checks"]["cities"]["status"] == "ok"


def test_pexels_check_is_optional(monkeypatch, tmp_path) -> None:
    write_sample_dataset(tmp_path)
    _set_required_env(monkeypatch, DATASET_DIR=str(tmp_path), PEXELS_API_KEY="test-key")

    async def _fake_tcp(*args, **kwargs):
        return {"status": "fail", "ok": False, "required": False, "detail": "mock-fail"}

    monkeypatch.setattr("destino_facil.core.readiness._check_tcp_connectivity", _fake_tcp)

    result = asyncio.run(collect_readiness_status())

    assert result["status"] == "ready"
    assert result["checks"]["pexels"]["status"] == "fail"
