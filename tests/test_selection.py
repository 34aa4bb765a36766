import random

from recommendations_api.app.repositories.recommendation_repository import ScoreFilter
from recommendations_api.app.services import selection


def test_low_draws_target_high_tier():
    assert selection.pick_tier(0.0) == ScoreFilter(score_filter="gt", score=10)
    assert selection.pick_tier(0.6) == ScoreFilter(score_filter="gt", score=10)
    assert selection.pick_tier(0.6999) == ScoreFilter(score_filter="gt", score=10)


def test_high_draws_target_low_tier():
    assert selection.pick_tier(0.7) == ScoreFilter(score_filter="lte", score=10)
    assert selection.pick_tier(0.8) == ScoreFilter(score_filter="lte", score=10)
    assert selection.pick_tier(0.9999) == ScoreFilter(score_filter="lte", score=10)


def test_choose_returns_member():
    rng = random.Random(42)
    items = ["a", "b", "c"]
    for _ in range(20):
        assert selection.choose(items, rng) in items


def test_choose_reaches_every_candidate():
    rng = random.Random(7)
    items = ["a", "b", "c"]
    seen = {selection.choose(items, rng) for _ in range(300)}
    assert seen == set(items)


def test_single_candidate():
    assert selection.choose(["only"], random.Random()) == "only"
