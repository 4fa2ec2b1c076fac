"""인기도 점수 테스트."""

from __future__ import annotations

from destino_facil.services.enrichment import DestinationEnricher
from destino_facil.services.popularity import PopularityScorer, PopularityWeights
from tests.mocks.sample_dataset import build_loader


def _destination(tmp_path, city_id: int):
    loader = build_loader(tmp_path)
    city = loader.find_city_by_id(city_id)
    return DestinationEnricher().enrich(city, loader.country_for(city))


def test_paris_score_combines_region_price_climate_fame_and_population(tmp_path) -> None:
    # Western Europe 30 + high 15 + temperate 7 + famous 50 + population > 1M 10
    assert PopularityScorer().score(_destination(tmp_path, 1)) == 112


def test_population_bonus_is_not_cumulative(tmp_path) -> None:
    tokyo = _destination(tmp_path, 9)
    weights = PopularityWeights(
        region_scores={},
        default_region_score=0,
        price_tier_bonuses={},
        climate_bonuses={},
        famous_cities=(),
    )

    assert PopularityScorer(weights).score(tokyo) == 20


def test_unknown_region_uses_default_score(tmp_path) -> None:
    weights = PopularityWeights(
        region_scores={},
        default_region_score=3,
        price_tier_bonuses={},
        climate_bonuses={},
        famous_cities=(),
        population_breakpoints=(),
    )

    assert PopularityScorer(weights).score(_destination(tmp_path, 1)) == 3


def test_score_is_deterministic(tmp_path) -> None:
    scorer = PopularityScorer()
    destination = _destination(tmp_path, 7)

    assert scorer.score(destination) == scorer.score(destination)
