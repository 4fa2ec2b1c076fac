"""여행지 보강(enrichment)과 인기도 점수 계산에 사용하는 고정 참조 테이블."""

from __future__ import annotations

REGION_TRANSLATIONS: dict[str, dict[str, str]] = {
    "pt-BR": {
        "Europe": "Europa",
        "Asia": "Ásia",
        "Africa": "África",
        "Americas": "Américas",
        "North America": "América do Norte",
        "South America": "América do Sul",
        "Central America": "América Central",
        "Oceania": "Oceania",
        "Antarctica": "Antártida",
        "Polar": "Polar",
        "Western Europe": "Europa Ocidental",
        "Eastern Europe": "Europa Oriental",
        "Southern Europe": "Europa Meridional",
        "Northern Europe": "Europa Setentrional",
        "Western Asia": "Ásia Ocidental",
        "Eastern Asia": "Ásia Oriental",
        "Southern Asia": "Ásia Meridional",
        "South-Eastern Asia": "Sudeste Asiático",
        "Central Asia": "Ásia Central",
        "Northern Africa": "África Setentrional",
        "Western Africa": "África Ocidental",
        "Eastern Africa": "África Oriental",
        "Southern Africa": "África Meridional",
        "Middle Africa": "África Central",
        "Northern America": "América do Norte",
        "Caribbean": "Caribe",
        "Melanesia": "Melanésia",
        "Micronesia": "Micronésia",
        "Polynesia": "Polinésia",
        "Australia and New Zealand": "Austrália e Nova Zelândia",
    },
}

KNOWN_CITY_POPULATIONS: dict[str, int] = {
    "tokyo": 37435191,
    "delhi": 29399141,
    "shanghai": 26317104,
    "são paulo": 22043028,
    "mexico city": 21671908,
    "cairo": 20484965,
    "mumbai": 20185064,
    "beijing": 20035455,
    "dhaka": 19578421,
    "osaka": 19222665,
    "new york": 18823000,
    "karachi": 15400000,
    "buenos aires": 15180000,
    "chongqing": 15003000,
    "istanbul": 15029231,
    "kolkata": 14850000,
    "manila": 13482462,
    "lagos": 13463000,
    "rio de janeiro": 13293000,
    "tianjin": 13215000,
    "london": 9648110,
    "paris": 2161000,
    "berlin": 3748148,
    "madrid": 3223334,
    "rome": 2872800,
    "kyiv": 2952301,
    "bucharest": 2155240,
    "hamburg": 1899160,
    "warsaw": 1790658,
    "vienna": 1911191,
    "barcelona": 1620343,
    "munich": 1484226,
    "milan": 1378689,
    "prague": 1318982,
    "sofia": 1242568,
    "budapest": 1759407,
    "stockholm": 975551,
    "amsterdam": 873555,
    "lisbon": 544851,
    "dublin": 554554,
    "brussels": 1208542,
    "copenhagen": 602481,
    "helsinki": 648042,
    "oslo": 697010,
    "zurich": 415367,
    "geneva": 201818,
    "athens": 664046,
    "toronto": 2930000,
    "montreal": 1704694,
    "vancouver": 631486,
    "los angeles": 12400000,
    "chicago": 8200000,
    "miami": 5800000,
    "sydney": 5312163,
    "melbourne": 5078193,
    "brisbane": 2560720,
    "perth": 2059484,
    "auckland": 1695200,
    "tel aviv": 460613,
    "dubai": 3331420,
    "singapore": 5850342,
    "hong kong": 7482500,
    "kuala lumpur": 1768000,
    "bangkok": 10156000,
    "jakarta": 10562088,
    "seoul": 9720846,
    "busan": 3448737,
    "bangalore": 12326532,
    "chennai": 10971108,
    "hyderabad": 10004000,
    "lima": 9700000,
    "bogotá": 9600000,
    "santiago": 6700000,
    "brasília": 3055149,
    "salvador": 2900319,
    "belo horizonte": 5800000,
    "johannesburg": 5400000,
    "cape town": 4618000,
}

# 수도: 지역/하위지역 -> (최소, 최대) 인구 범위
CAPITAL_POPULATION_RANGES: dict[str, tuple[int, int]] = {
    "Western Europe": (1_000_000, 4_000_000),
    "Northern America": (1_000_000, 4_000_000),
    "Eastern Asia": (5_000_000, 20_000_000),
    "Southern Asia": (5_000_000, 20_000_000),
    "South America": (2_000_000, 10_000_000),
    "Eastern Europe": (2_000_000, 10_000_000),
}
DEFAULT_CAPITAL_POPULATION_RANGE: tuple[int, int] = (500_000, 2_500_000)

# 수도가 아닌 도시
CITY_POPULATION_RANGES: dict[str, tuple[int, int]] = {
    "Western Europe": (100_000, 1_100_000),
    "Northern America": (100_000, 1_100_000),
    "Eastern Asia": (500_000, 5_500_000),
    "Southern Asia": (500_000, 5_500_000),
}
DEFAULT_CITY_POPULATION_RANGE: tuple[int, int] = (50_000, 550_000)

HIGH_COST_REGIONS: frozenset[str] = frozenset(
    {"Western Europe", "Northern Europe", "Northern America", "Oceania", "Australia and New Zealand"}
)
LOW_COST_REGIONS: frozenset[str] = frozenset(
    {"South-Eastern Asia", "Southern Asia", "South America", "Eastern Europe", "Central America"}
)

FLAG_URL_TEMPLATE = "https://flagcdn.com/w320/{iso2}.png"

MOUNTAIN_COUNTRY_CODES: frozenset[str] = frozenset(
    {"CH", "AT", "NP", "BT", "PE", "BO", "NO", "IS", "NZ", "CL", "AD", "LI", "KG", "TJ", "GE", "AM"}
)
DESERT_SUBREGIONS: frozenset[str] = frozenset({"Northern Africa", "Western Asia", "Central Asia"})

NOTABLE_CITY_NAMES: frozenset[str] = frozenset(
    {
        "rio de janeiro", "são paulo", "salvador", "fortaleza", "brasília", "recife", "belo horizonte",
        "porto alegre", "curitiba", "manaus",
        "new york", "los angeles", "san francisco", "las vegas", "miami", "chicago", "boston", "washington",
        "seattle", "philadelphia",
        "paris", "marseille", "nice", "lyon", "cannes", "bordeaux", "toulouse", "strasbourg",
        "london", "manchester", "edinburgh", "liverpool", "birmingham", "glasgow", "oxford", "cambridge",
        "rome", "milan", "venice", "florence", "naples", "turin", "bologna", "genoa", "palermo",
        "barcelona", "madrid", "seville", "valencia", "bilbao", "granada", "toledo", "salamanca",
        "berlin", "munich", "hamburg", "cologne", "frankfurt", "stuttgart", "dresden", "heidelberg",
        "amsterdam", "rotterdam", "the hague", "utrecht", "eindhoven",
        "vienna", "salzburg", "innsbruck", "graz",
        "prague", "brno", "ostrava",
        "tokyo", "osaka", "kyoto", "hiroshima", "nagoya", "yokohama", "kobe", "fukuoka",
        "seoul", "busan", "incheon", "daegu",
        "bangkok", "phuket", "chiang mai", "pattaya",
        "singapore", "hong kong",
        "beijing", "shanghai", "guangzhou", "shenzhen", "chengdu", "hangzhou", "nanjing",
        "sydney", "melbourne", "perth", "brisbane", "adelaide", "canberra",
        "dubai", "abu dhabi", "sharjah",
        "istanbul", "ankara", "izmir", "antalya",
        "moscow", "st petersburg", "novosibirsk", "yekaterinburg",
        "cairo", "alexandria", "luxor", "aswan",
        "marrakech", "casablanca", "fez", "rabat",
        "cape town", "johannesburg", "durban", "pretoria",
        "buenos aires", "córdoba", "rosario", "mendoza",
        "santiago", "valparaíso", "concepción",
        "lima", "cusco", "arequipa",
        "mumbai", "delhi", "bangalore", "goa", "kolkata", "chennai", "hyderabad", "pune",
        "lisbon", "porto", "faro", "coimbra",
        "athens", "thessaloniki", "patras",
        "zurich", "geneva", "basel", "bern",
        "toronto", "vancouver", "montreal", "calgary", "ottawa",
        "mexico city", "guadalajara", "monterrey", "cancun", "puerto vallarta",
    }
)

# 같은 이름의 도시가 여러 국가에 있을 때 기본 목록에 남길 국가 우선순위
COUNTRY_PRIORITIES: dict[str, int] = {
    "Egypt": 10,
    "United States": 9,
    "United Kingdom": 8,
    "France": 8,
    "Italy": 8,
    "Japan": 8,
    "Spain": 7,
    "Germany": 7,
    "China": 7,
    "Brazil": 6,
    "Australia": 5,
    "Mexico": 5,
    "Canada": 4,
}
DEFAULT_COUNTRY_PRIORITY = 1

REGION_POPULARITY_SCORES: dict[str, int] = {
    "Western Europe": 30,
    "Southern Europe": 28,
    "Northern America": 27,
    "Northern Europe": 25,
    "Eastern Asia": 24,
    "South-Eastern Asia": 22,
    "Australia and New Zealand": 22,
    "Caribbean": 20,
    "South America": 18,
    "Western Asia": 17,
    "Eastern Europe": 16,
    "Northern Africa": 15,
    "Central America": 15,
    "Southern Asia": 14,
    "Europe": 26,
    "Asia": 20,
    "Americas": 20,
    "Oceania": 20,
    "Africa": 12,
}
DEFAULT_REGION_POPULARITY_SCORE = 10

PRICE_TIER_BONUSES: dict[str, int] = {"high": 15, "medium": 10, "low": 5}
CLIMATE_BONUSES: dict[str, int] = {"hot": 10, "temperate": 7, "cold": 3}

FAMOUS_CITY_NAMES: tuple[str, ...] = (
    "paris", "london", "new york", "tokyo", "rome", "barcelona", "amsterdam", "dubai", "singapore",
    "bangkok", "istanbul", "rio de janeiro", "sydney", "los angeles", "lisbon", "prague", "venice",
    "kyoto", "cancun", "buenos aires", "cape town", "seoul", "hong kong", "madrid", "berlin",
)
FAMOUS_CITY_BONUS = 50

# (인구 하한 초과, 보너스) - 큰 순서대로, 처음 일치하는 구간 하나만 적용
POPULATION_BONUS_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (10_000_000, 20),
    (5_000_000, 15),
    (1_000_000, 10),
    (500_000, 5),
)
