"""항공권 가격 휴리스틱에 사용하는 고정 테이블.

가격 단위는 통화 중립적인 정수(USD 기준 추정치)이며, 통화 변환은 호출자가 담당합니다.
"""

from __future__ import annotations

REGION_FACTORS: dict[str, float] = {
    "Brazil": 1.0,
    "South America": 1.2,
    "North America": 1.8,
    "Europe": 2.0,
    "Asia": 2.3,
    "Africa": 2.2,
    "Oceania": 2.5,
}
DEFAULT_FLIGHT_REGION = "South America"

COUNTRY_TO_FLIGHT_REGION: dict[str, str] = {
    "Brazil": "Brazil",
    "Argentina": "South America",
    "Chile": "South America",
    "Colombia": "South America",
    "Peru": "South America",
    "Uruguay": "South America",
    "Bolivia": "South America",
    "Ecuador": "South America",
    "Paraguay": "South America",
    "Venezuela": "South America",
    "United States": "North America",
    "Canada": "North America",
    "Mexico": "North America",
    "Cuba": "North America",
    "United Kingdom": "Europe",
    "France": "Europe",
    "Germany": "Europe",
    "Italy": "Europe",
    "Spain": "Europe",
    "Portugal": "Europe",
    "Netherlands": "Europe",
    "Belgium": "Europe",
    "Switzerland": "Europe",
    "Austria": "Europe",
    "Ireland": "Europe",
    "Greece": "Europe",
    "Japan": "Asia",
    "China": "Asia",
    "South Korea": "Asia",
    "India": "Asia",
    "Thailand": "Asia",
    "Vietnam": "Asia",
    "Singapore": "Asia",
    "Malaysia": "Asia",
    "Indonesia": "Asia",
    "Philippines": "Asia",
    "South Africa": "Africa",
    "Egypt": "Africa",
    "Morocco": "Africa",
    "Kenya": "Africa",
    "Nigeria": "Africa",
    "Australia": "Oceania",
    "New Zealand": "Oceania",
}

# 데이터셋의 대륙 단위 region -> 항공 지역 (국가 테이블에 없을 때 사용)
DATASET_REGION_TO_FLIGHT_REGION: dict[str, str] = {
    "Europe": "Europe",
    "Asia": "Asia",
    "Africa": "Africa",
    "Oceania": "Oceania",
    "Northern America": "North America",
    "Central America": "North America",
    "Caribbean": "North America",
    "South America": "South America",
}

# (최대 거리 km, 기본 가격)
DISTANCE_PRICE_TIERS: tuple[tuple[float, int], ...] = (
    (500, 150),
    (1000, 250),
    (2000, 400),
    (5000, 700),
    (10000, 1100),
    (15000, 1500),
    (20000, 2000),
)
EXTRA_PRICE_PER_1000_KM = 100

# 1월=1 ... 12월=12
SEASON_FACTORS: dict[int, float] = {
    1: 1.2,
    2: 1.3,
    3: 1.0,
    4: 0.9,
    5: 0.85,
    6: 0.9,
    7: 1.1,
    8: 0.9,
    9: 0.85,
    10: 0.9,
    11: 1.0,
    12: 1.3,
}

POPULAR_ROUTES: dict[tuple[str, str], float] = {
    ("são paulo", "rio de janeiro"): 0.9,
    ("são paulo", "brasília"): 0.95,
    ("são paulo", "recife"): 1.0,
    ("rio de janeiro", "brasília"): 0.95,
    ("rio de janeiro", "salvador"): 0.9,
    ("são paulo", "buenos aires"): 1.0,
    ("são paulo", "santiago"): 1.0,
    ("são paulo", "new york"): 1.05,
    ("rio de janeiro", "paris"): 1.05,
    ("são paulo", "london"): 1.05,
    ("são paulo", "miami"): 1.0,
    ("são paulo", "orlando"): 0.95,
    ("são paulo", "lisbon"): 1.0,
    ("são paulo", "madrid"): 1.0,
    ("são paulo", "frankfurt"): 1.05,
}

DEAL_ORIGINS: tuple[str, ...] = (
    "São Paulo",
    "Rio de Janeiro",
    "Brasília",
    "Belo Horizonte",
    "Salvador",
    "Fortaleza",
    "Recife",
    "Porto Alegre",
    "Curitiba",
)
DEAL_COUNT = 3

# (노선 계수 상한, 할인 계수) - 경쟁이 치열한 노선일수록 할인 폭이 큼
DEAL_DISCOUNT_TIERS: tuple[tuple[float, float], ...] = (
    (0.95, 0.75),
    (1.0, 0.8),
)
DEFAULT_DEAL_DISCOUNT = 0.85

FALLBACK_CITY_GROUPS: dict[str, tuple[str, ...]] = {
    "brazil": (
        "São Paulo", "Rio", "Brasília", "Salvador", "Fortaleza", "Belo Horizonte", "Manaus", "Curitiba",
        "Recife", "Porto Alegre", "Belém", "Goiânia", "Guarulhos", "Campinas", "São Luís", "Natal",
    ),
    "europe": (
        "London", "Paris", "Berlin", "Madrid", "Rome", "Amsterdam", "Barcelona", "Lisbon", "Vienna",
        "Athens", "Dublin", "Brussels", "Prague",
    ),
    "north_america": (
        "New York", "Los Angeles", "Chicago", "Toronto", "Miami", "Vancouver", "San Francisco",
        "Las Vegas", "Orlando", "Washington", "Boston", "Seattle", "Atlanta", "Dallas", "Houston", "Denver",
    ),
    "asia": (
        "Tokyo", "Seoul", "Beijing", "Shanghai", "Hong Kong", "Singapore", "Bangkok", "Delhi", "Mumbai",
        "Dubai", "Tel Aviv", "Doha",
    ),
    "oceania": ("Sydney", "Melbourne", "Auckland", "Brisbane", "Perth", "Adelaide", "Wellington", "Queenstown"),
}

# 브라질 출발/도착 노선의 상대 그룹별 기본 가격
FALLBACK_BRAZIL_ROUTE_PRICES: dict[str, int] = {
    "brazil": 250,
    "europe": 1200,
    "north_america": 800,
    "asia": 1800,
    "oceania": 2000,
}
FALLBACK_SOUTH_AMERICA_PRICE = 600
FALLBACK_INTERNATIONAL_PRICE = 800

GOOGLE_FLIGHTS_URL = "https://www.google.com/travel/flights"
