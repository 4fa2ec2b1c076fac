"""타임아웃 정책 유틸 테스트."""

from destino_facil.core.config import Settings
from destino_facil.core.timeout_policy import build_timeout_policy, to_requests_timeout


def test_build_timeout_policy_caps_by_request_timeout() -> None:
    settings = Settings(
        REQUEST_TIMEOUT_SECONDS=8,
        DATASET_LOAD_TIMEOUT_SECONDS=30,
        EXTERNAL_API_TIMEOUT_SECONDS=20,
        IMAGE_TIMEOUT_SECONDS=15,
    )

    policy = build_timeout_policy(settings)

    assert policy.request_timeout_seconds == 8
    assert policy.dataset_load_timeout_seconds == 8
    assert policy.external_api_timeout_seconds == 8
    assert policy.image_timeout_seconds == 8


def test_image_timeout_is_capped_by_external_timeout() -> None:
    policy = build_timeout_policy(Settings(EXTERNAL_API_TIMEOUT_SECONDS=3, IMAGE_TIMEOUT_SECONDS=5))

    assert policy.image_timeout_seconds == 3


def test_to_requests_timeout_returns_connect_and_read_timeout() -> None:
    connect_timeout, read_timeout = to_requests_timeout(10)

    assert connect_timeout == 3.0
    assert read_timeout == 7.0
