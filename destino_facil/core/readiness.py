"""애플리케이션 준비성(readiness) 체크 유틸."""

from __future__ import annotations

import asyncio
import json
import socket
from pathlib import Path

from destino_facil.core.config import Settings, get_settings
from destino_facil.core.timeout_policy import TimeoutPolicy, get_timeout_policy

ReadinessCheck = dict[str, str | bool]


def _ok(detail: str, *, required: bool = True) -> ReadinessCheck:
    return {"status": "ok", "ok": True, "required": required, "detail": detail}


def _fail(detail: str, *, required: bool = True) -> ReadinessCheck:
    return {"status": "fail", "ok": False, "required": required, "detail": detail}


def _skip(detail: str, *, required: bool = False) -> ReadinessCheck:
    return {"status": "skip", "ok": True, "required": required, "detail": detail}


async def _check_tcp_connectivity(host: str, port: int, timeout_seconds: int, label: str) -> ReadinessCheck:
    def _connect() -> None:
        with socket.create_connection((host, port), timeout=timeout_seconds):
            return None

    try:
        await asyncio.to_thread(_connect)
        return _ok(f"{label} 연결 가능 ({host}:{port})", required=False)
    except OSError as exc:
        return _fail(f"{label} 연결 실패 ({host}:{port}): {exc}", required=False)


def _count_json_rows(path: Path) -> int:
    with path.open(encoding="utf-8") as fp:
        payload = json.load(fp)
    if not isinstance(payload, list):
        raise ValueError("최상위 값이 list가 아닙니다.")
    return len(payload)


async def _check_dataset_file(path: Path, label: str, timeout_policy: TimeoutPolicy) -> ReadinessCheck:
    if not path.is_file():
        return _fail(f"{label} 파일이 없습니다: {path}")

    try:
        rows = await asyncio.wait_for(
            asyncio.to_thread(_count_json_rows, path),
            timeout=timeout_policy.dataset_load_timeout_seconds,
        )
    except asyncio.TimeoutError:
        return _fail(f"{label} 파일 읽기 시간 초과: {path}")
    except (OSError, ValueError) as exc:
        return _fail(f"{label} 파일을 읽을 수 없습니다: {exc}")
    return _ok(f"{label} {rows}건 확인")


async def _check_pexels_readiness(settings: Settings, timeout_policy: TimeoutPolicy) -> ReadinessCheck:
    if not settings.PEXELS_API_KEY:
        return _skip("PEXELS_API_KEY 미설정으로 Pexels 체크를 건너뜁니다.")

    return await _check_tcp_connectivity(
        host="api.pexels.com",
        port=443,
        timeout_seconds=timeout_policy.image_timeout_seconds,
        label="Pexels API",
    )


async def collect_readiness_status() -> dict[str, object]:
    """데이터셋/외부 API 의존성 준비 상태를 점검합니다."""
    settings = get_settings()
    timeout_policy = get_timeout_policy(settings)

    countries_check, cities_check, pexels_check = await asyncio.gather(
        _check_dataset_file(settings.countries_path, "countries", timeout_policy),
        _check_dataset_file(settings.cities_path, "cities", timeout_policy),
        _check_pexels_readiness(settings, timeout_policy),
    )

    checks: dict[str, ReadinessCheck] = {
        "countries": countries_check,
        "cities": cities_check,
        "pexels": pexels_check,
    }
    required_checks_ok = all(bool(check["ok"]) for check in checks.values() if bool(check.get("required", True)))

    return {
        "status": "ready" if required_checks_ok else "not_ready",
        "checks": checks,
    }
