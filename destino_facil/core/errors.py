"""탐색 코어에서 사용하는 예외 계층."""


class DiscoveryError(RuntimeError):
    """탐색 코어 예외의 공통 부모."""


class DataUnavailable(DiscoveryError):
    """정적 참조 데이터셋을 읽을 수 없을 때 발생합니다."""


class InvalidRequest(DiscoveryError, ValueError):
    """페이지/크기 등 요청 파라미터가 허용 범위를 벗어났을 때 발생합니다."""


class EstimationFallback(DiscoveryError):
    """항공권 가격 추정에 필요한 좌표를 확인하지 못했을 때 발생합니다."""


class ExternalLookupFailure(DiscoveryError):
    """이미지 등 외부 조회가 실패했을 때 발생합니다."""
