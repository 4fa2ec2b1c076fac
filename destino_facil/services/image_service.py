"""여행지 이미지 조회 서비스.

Pexels 검색을 우선 사용하고, 키가 없거나 호출이 실패하면 로컬 플레이스홀더 이미지로 대체합니다.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import requests

from destino_facil.core.cache import TTLCache
from destino_facil.core.config import get_settings
from destino_facil.core.errors import ExternalLookupFailure
from destino_facil.core.logger import get_logger
from destino_facil.core.timeout_policy import get_timeout_policy, to_requests_timeout
from destino_facil.schemas.destination import DestinationImage

logger = get_logger(__name__)

IMAGE_CACHE_PREFIX = "images:"
_PLACEHOLDER_COLORS = ("#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6", "#06b6d4")


class ImageProvider(ABC):
    """도시 이미지 검색 인터페이스."""

    @abstractmethod
    async def search(self, city_name: str) -> list[DestinationImage]:
        """도시명으로 이미지를 검색합니다.

        Raises:
            ExternalLookupFailure: 외부 호출이 실패한 경우
        """
        raise NotImplementedError


class PexelsImageService(ImageProvider):
    """Pexels 검색 API 기반 이미지 서비스."""

    _BASE_URL = "https://api.pexels.com/v1"
    _SEARCH_PATH = "/search"

    def __init__(self, api_key: str, timeout_seconds: int = 5, per_page: int = 6) -> None:
        if not api_key:
            raise ExternalLookupFailure("PEXELS_API_KEY is not configured.")
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._per_page = per_page

    @classmethod
    def from_settings(cls) -> PexelsImageService:
        """애플리케이션 설정으로 서비스 인스턴스를 생성합니다."""
        settings = get_settings()
        timeout_policy = get_timeout_policy(settings)
        return cls(
            api_key=settings.PEXELS_API_KEY or "",
            timeout_seconds=timeout_policy.image_timeout_seconds,
        )

    async def search(self, city_name: str) -> list[DestinationImage]:
        if not city_name.strip():
            return []

        params = {
            "query": f"{city_name} city travel destination",
            "per_page": self._per_page,
            "orientation": "landscape",
        }
        data = await self._request(params)
        photos = data.get("photos") or []
        images = [image for image in (self._map_photo(item, city_name) for item in photos) if image]
        logger.info("Pexels search completed: city=%s image_count=%d", city_name, len(images))
        return images

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        headers = {"Authorization": self._api_key, "User-Agent": "DestinoFacil/1.0"}
        request_timeout = to_requests_timeout(self._timeout_seconds)

        def _send() -> requests.Response:
            with requests.Session() as session:
                return session.get(
                    f"{self._BASE_URL}{self._SEARCH_PATH}",
                    params=params,
                    headers=headers,
                    timeout=request_timeout,
                )

        try:
            response = await asyncio.to_thread(_send)
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as exc:
            response = exc.response
            status_code = response.status_code if response is not None else None
            raise ExternalLookupFailure(f"Pexels API error: status={status_code}") from exc
        except requests.RequestException as exc:
            raise ExternalLookupFailure(f"Pexels API request failed: {exc}") from exc
        except ValueError as exc:
            raise ExternalLookupFailure(f"Pexels API response parse failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise ExternalLookupFailure("Pexels API response is not an object.")
        return payload

    @staticmethod
    def _map_photo(raw: dict[str, Any], city_name: str) -> DestinationImage | None:
        src = raw.get("src") or {}
        url = src.get("large")
        photo_id = raw.get("id")
        if not (url and photo_id is not None):
            return None

        return DestinationImage(
            id=str(photo_id),
            url=url,
            thumbnail=src.get("medium") or url,
            alt=f"Foto de {city_name}",
            photographer=raw.get("photographer"),
            photographer_url=raw.get("photographer_url"),
        )


def _placeholder_svg(city_name: str, color: str, width: int, height: int) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f'<rect width="{width}" height="{height}" fill="{color}" fill-opacity="0.6"/>'
        f'<text x="50%" y="50%" text-anchor="middle" font-family="system-ui" '
        f'font-size="{height // 12}" fill="white" font-weight="bold">{city_name}</text>'
        "</svg>"
    )


class LocalImageService(ImageProvider):
    """네트워크 없이 SVG 플레이스홀더 이미지를 생성합니다."""

    async def search(self, city_name: str) -> list[DestinationImage]:
        return [self.placeholder(city_name)]

    @staticmethod
    def placeholder(city_name: str) -> DestinationImage:
        name = city_name.strip() or "?"
        color = _PLACEHOLDER_COLORS[len(name) % len(_PLACEHOLDER_COLORS)]
        full = _placeholder_svg(name, color, 800, 600)
        thumb = _placeholder_svg(name, color, 400, 300)
        return DestinationImage(
            id="placeholder",
            url=f"data:image/svg+xml,{quote(full)}",
            thumbnail=f"data:image/svg+xml,{quote(thumb)}",
            alt=f"Placeholder para {name}",
        )


class DestinationImageService:
    """외부 제공자 -> 로컬 대체 순서로 이미지를 조회하고 결과를 캐시합니다."""

    def __init__(
        self,
        cache: TTLCache,
        *,
        primary: ImageProvider | None = None,
        fallback: ImageProvider | None = None,
        ttl_seconds: float = 86400.0,
        fallback_ttl_seconds: float = 3600.0,
    ) -> None:
        self._cache = cache
        self._primary = primary
        self._fallback = fallback or LocalImageService()
        self._ttl_seconds = ttl_seconds
        self._fallback_ttl_seconds = min(fallback_ttl_seconds, ttl_seconds)

    async def images_for(self, city_name: str) -> list[DestinationImage]:
        key = f"{IMAGE_CACHE_PREFIX}{city_name.strip().casefold()}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if self._primary is not None:
            try:
                images = await self._primary.search(city_name)
            except ExternalLookupFailure as exc:
                logger.warning("Image lookup failed, using local images: city=%s error=%s", city_name, exc)
            else:
                if images:
                    self._cache.set(key, images, self._ttl_seconds)
                    return images

        try:
            images = await self._fallback.search(city_name)
        except ExternalLookupFailure as exc:
            logger.warning("Local image lookup failed: city=%s error=%s", city_name, exc)
            return [LocalImageService.placeholder(city_name)]

        self._cache.set(key, images, self._fallback_ttl_seconds)
        return images


@lru_cache(maxsize=1)
def get_pexels_image_service() -> PexelsImageService | None:
    """키가 설정된 경우에만 프로세스 단위 Pexels 서비스를 반환합니다."""
    if not get_settings().PEXELS_API_KEY:
        logger.info("PEXELS_API_KEY is not configured. Using local images only.")
        return None
    return PexelsImageService.from_settings()
